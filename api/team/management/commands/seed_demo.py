from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from library.models import Template
from rfps.models import Rfp
from team.models import TeamMember

MEMBERS = [
    # username, full name, role, title
    ('sarah', 'Sarah Johnson', 'pm', 'Principal'),
    ('michael', 'Michael Chen', 'managing_director', 'Managing Director'),
    ('emily', 'Emily Rodriguez', 'consultant', 'Senior Consultant'),
    ('david', 'David Kim', 'consultant', 'Research Associate'),
    ('lisa', 'Lisa Thompson', 'copy_editor', 'Copy Editor'),
]

TEMPLATES = [
    ('Executive Summary', 'Opening overview of the proposal.', 'Overview',
     'Our team is pleased to submit this response.'),
    ('Technical Approach', 'How the work will be carried out.', 'Technical',
     'Our approach consists of the following phases.'),
    ('Past Performance', 'Relevant prior engagements.', 'Qualifications',
     'We have delivered similar programs for the following clients.'),
]

DEMO_DOCUMENT = (
    "The contractor must provide monthly progress reports. "
    "The vendor shall maintain a project budget not exceeding the approved amount. "
    "Key personnel will provide on-site support during implementation."
)


class Command(BaseCommand):
    help = 'Create demo team members, templates and an RFP. Safe to run repeatedly.'

    def add_arguments(self, parser):
        parser.add_argument('--password', default='demo1234', help='Password for the demo login users.')

    @transaction.atomic
    def handle(self, *args, **options):
        User = get_user_model()
        created = 0
        for username, full_name, role, title in MEMBERS:
            user, user_created = User.objects.get_or_create(username=username, defaults={'email': f'{username}@example.com'})
            if user_created:
                user.set_password(options['password'])
                user.save(update_fields=['password'])
            _, member_created = TeamMember.objects.get_or_create(
                username=username,
                defaults={
                    'user': user,
                    'email': f'{username}@example.com',
                    'full_name': full_name,
                    'role': role,
                    'title': title,
                },
            )
            created += int(member_created)
        for name, description, category, content in TEMPLATES:
            Template.objects.get_or_create(
                name=name, defaults={'description': description, 'category': category, 'content': content}
            )
        pm = TeamMember.objects.get(username='sarah')
        Rfp.objects.get_or_create(
            title='Statewide Workforce Development Evaluation',
            defaults={
                'source': 'state',
                'agency': 'Department of Labor',
                'state': 'California',
                'keywords': ['evaluation', 'workforce'],
                'document_content': DEMO_DOCUMENT,
                'assigned_pm': pm,
            },
        )
        self.stdout.write(self.style.SUCCESS(f'seed_demo done: {created} new team member(s).'))
