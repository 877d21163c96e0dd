import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Income',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('icon', models.CharField(blank=True, max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('date', models.DateTimeField(db_index=True)),
                ('source', models.CharField(max_length=100, verbose_name='수입원')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='income_set', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': '수입',
                'verbose_name_plural': '수입',
                'db_table': 'incomes',
                'ordering': ['-date'],
                'abstract': False,
                'indexes': [models.Index(fields=['user', '-date'], name='income_user_date_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(amount__gt=0), name='income_amount_positive')],
            },
        ),
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('icon', models.CharField(blank=True, max_length=255)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('date', models.DateTimeField(db_index=True)),
                ('category', models.CharField(max_length=100, verbose_name='카테고리')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='expense_set', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': '지출',
                'verbose_name_plural': '지출',
                'db_table': 'expenses',
                'ordering': ['-date'],
                'abstract': False,
                'indexes': [models.Index(fields=['user', '-date'], name='expense_user_date_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(amount__gt=0), name='expense_amount_positive')],
            },
        ),
    ]
