from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from rfps.models import Rfp
from team.actor import member_for_request

from .models import Review
from .serializers import ReviewCreateSerializer, ReviewSerializer, ReviewUpdateSerializer
from .workflow import decide, open_review


class DebugOrAuthView(APIView):
    def get_permissions(self):
        return [permissions.IsAuthenticated()] if not settings.DEBUG else [permissions.AllowAny()]


class ReviewListView(DebugOrAuthView):
    def get(self, request):
        qs = Review.objects.select_related('rfp', 'reviewer')
        review_status = request.query_params.get('status')
        if review_status:
            qs = qs.filter(status=review_status)
        return Response(ReviewSerializer(qs, many=True).data)


class RfpReviewsView(DebugOrAuthView):
    def get(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        return Response(ReviewSerializer(rfp.reviews.select_related('reviewer'), many=True).data)

    def post(self, request, rfp_id: int):
        rfp = get_object_or_404(Rfp, pk=rfp_id)
        ser = ReviewCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        review = open_review(rfp, ser.validated_data['type'])
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class ReviewDetailView(DebugOrAuthView):
    def patch(self, request, review_id: int):
        review = get_object_or_404(Review, pk=review_id)
        ser = ReviewUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        if 'status' in data:
            review = decide(
                review,
                data['status'],
                reviewer=member_for_request(request),
                comments=data.get('comments'),
            )
        elif 'comments' in data:
            review.comments = data['comments']
            review.save(update_fields=['comments'])
        return Response(ReviewSerializer(review).data)
