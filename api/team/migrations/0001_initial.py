import uuid

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
            name='TeamMember',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=150, unique=True)),
                ('email', models.EmailField(max_length=254)),
                ('full_name', models.CharField(max_length=200)),
                (
                    'role',
                    models.CharField(
                        choices=[
                            ('pm', 'Proposal Manager'),
                            ('consultant', 'Consultant'),
                            ('copy_editor', 'Copy Editor'),
                            ('managing_director', 'Managing Director'),
                        ],
                        default='consultant',
                        max_length=32,
                    ),
                ),
                ('title', models.CharField(blank=True, default='', max_length=200)),
                ('hourly_rate', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                (
                    'user',
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='team_member',
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                'ordering': ['full_name', 'username'],
            },
        ),
    ]
