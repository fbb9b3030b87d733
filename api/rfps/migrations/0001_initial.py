from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('team', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Rfp',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=300)),
                (
                    'source',
                    models.CharField(choices=[('federal', 'Federal'), ('state', 'State')], default='federal', max_length=16),
                ),
                ('agency', models.CharField(blank=True, default='', max_length=300)),
                ('document_url', models.CharField(blank=True, default='', max_length=800)),
                ('document_content', models.TextField(blank=True, default='')),
                (
                    'status',
                    models.CharField(
                        choices=[
                            ('draft', 'Draft'),
                            ('analyzing', 'Analyzing'),
                            ('in_progress', 'In progress'),
                            ('review', 'In review'),
                            ('submitted', 'Submitted'),
                        ],
                        default='draft',
                        max_length=16,
                    ),
                ),
                ('due_date', models.DateTimeField(blank=True, null=True)),
                ('keywords', models.JSONField(blank=True, default=list)),
                ('state', models.CharField(blank=True, default='', max_length=64)),
                ('submitted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'assigned_pm',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='managed_rfps',
                        to='team.teammember',
                    ),
                ),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='Requirement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('text', models.TextField()),
                ('section', models.CharField(blank=True, default='', max_length=200)),
                (
                    'priority',
                    models.CharField(
                        choices=[('high', 'High'), ('medium', 'Medium'), ('low', 'Low')], default='medium', max_length=8
                    ),
                ),
                ('highlight_start', models.PositiveIntegerField(blank=True, null=True)),
                ('highlight_end', models.PositiveIntegerField(blank=True, null=True)),
                (
                    'status',
                    models.CharField(
                        choices=[('pending', 'Pending'), ('addressed', 'Addressed'), ('skipped', 'Skipped')],
                        default='pending',
                        max_length=16,
                    ),
                ),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                (
                    'rfp',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name='requirements', to='rfps.rfp'
                    ),
                ),
            ],
            options={
                'ordering': ['rfp_id', 'id'],
            },
        ),
    ]
