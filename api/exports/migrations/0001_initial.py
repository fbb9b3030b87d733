from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ('rfps', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ExportJob',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                (
                    'kind',
                    models.CharField(
                        choices=[('response', 'Response'), ('budget', 'Budget')], default='response', max_length=16
                    ),
                ),
                (
                    'format',
                    models.CharField(
                        choices=[
                            ('md', 'Markdown'),
                            ('pdf', 'PDF'),
                            ('docx', 'DOCX'),
                            ('csv', 'CSV'),
                            ('doc', 'Word (HTML)'),
                        ],
                        max_length=8,
                    ),
                ),
                ('status', models.CharField(default='pending', max_length=16)),
                ('url', models.CharField(blank=True, default='', max_length=500)),
                ('checksum', models.CharField(blank=True, default='', max_length=64)),
                ('error', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'rfp',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name='export_jobs', to='rfps.rfp'
                    ),
                ),
            ],
        ),
    ]
