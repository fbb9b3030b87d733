from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AIMetric',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                (
                    'type',
                    models.CharField(
                        choices=[('analyze', 'analyze'), ('insights', 'insights'), ('chat', 'chat')],
                        max_length=16,
                    ),
                ),
                ('model_id', models.CharField(blank=True, default='', max_length=64)),
                ('rfp_id', models.IntegerField(blank=True, null=True)),
                ('duration_ms', models.IntegerField(default=0)),
                ('tokens_used', models.IntegerField(default=0)),
                ('success', models.BooleanField(default=True)),
                ('rejected_count', models.IntegerField(default=0)),
                ('error_text', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                (
                    'created_by',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                'indexes': [models.Index(fields=['created_by', 'type', 'created_at'], name='aimetric_user_type_idx')],
            },
        ),
    ]
