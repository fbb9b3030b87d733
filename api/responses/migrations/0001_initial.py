from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('rfps', '0001_initial'),
        ('team', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProposalResponse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content', models.TextField(blank=True, default='')),
                ('last_saved_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                (
                    'rfp',
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE, related_name='response', to='rfps.rfp'
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name='ResponseSection',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(default='New Section', max_length=300)),
                ('content', models.TextField(blank=True, default='')),
                ('order_index', models.PositiveIntegerField(default=0)),
                ('is_locked', models.BooleanField(default=False)),
                ('version', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'assigned_to',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='assigned_sections',
                        to='team.teammember',
                    ),
                ),
                (
                    'locked_by',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='locked_sections',
                        to='team.teammember',
                    ),
                ),
                (
                    'response',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='sections',
                        to='responses.proposalresponse',
                    ),
                ),
            ],
            options={
                'ordering': ['response_id', 'order_index', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Insight',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                (
                    'type',
                    models.CharField(
                        choices=[
                            ('writing_improvement', 'Writing improvement'),
                            ('inconsistency', 'Inconsistency'),
                            ('language_match', 'Language match'),
                        ],
                        max_length=32,
                    ),
                ),
                ('text', models.TextField()),
                ('suggestion', models.TextField(blank=True, default='')),
                ('is_resolved', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                (
                    'response',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='insights',
                        to='responses.proposalresponse',
                    ),
                ),
                (
                    'section',
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name='insights',
                        to='responses.responsesection',
                    ),
                ),
            ],
            options={
                'ordering': ['-created_at', '-id'],
            },
        ),
    ]
