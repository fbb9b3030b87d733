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
            name='BudgetItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('year', models.PositiveSmallIntegerField()),
                ('hours', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('title', models.CharField(blank=True, default='', max_length=200)),
                ('rate_override', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('position', models.PositiveIntegerField(default=0)),
                (
                    'member',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name='budget_items',
                        to='team.teammember',
                    ),
                ),
                (
                    'rfp',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='budget_items',
                        to='rfps.rfp',
                    ),
                ),
            ],
            options={
                'ordering': ['rfp_id', 'position', 'year'],
                'unique_together': {('rfp', 'member', 'year')},
            },
        ),
    ]
