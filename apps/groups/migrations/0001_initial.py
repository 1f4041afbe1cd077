from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Group',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='Group name', max_length=100, unique=True)),
                ('description', models.TextField(blank=True)),
                ('pay_basis', models.CharField(choices=[('per_minute', 'Per reviewed minute'), ('per_syllable', 'Per reviewed syllable'), ('per_task', 'Per reviewed task')], default='per_minute', help_text='Which reviewed metric the pay rate applies to', max_length=15)),
                ('pay_rate', models.DecimalField(decimal_places=4, default=Decimal('0'), help_text='Amount (Rs.) paid per unit of the pay basis', max_digits=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'group',
                'verbose_name_plural': 'groups',
                'ordering': ['name'],
            },
        ),
    ]
