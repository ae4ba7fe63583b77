import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('department', models.CharField(blank=True, default='', max_length=255)),
                ('assigned_to', models.CharField(blank=True, default='', max_length=255)),
                ('severity', models.PositiveSmallIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(4)])),
                ('owner_id', models.CharField(max_length=255)),
                ('organization_id', models.CharField(max_length=255)),
                ('created_by_id', models.CharField(max_length=255)),
                ('updated_by_id', models.CharField(blank=True, max_length=255, null=True)),
                ('status', models.CharField(default='To Do', max_length=32)),
                ('created_on', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_on', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'tasks',
                'ordering': ['id'],
            },
        ),
        migrations.AddIndex(
            model_name='task',
            index=models.Index(fields=['owner_id', 'organization_id'], name='tasks_scope_idx'),
        ),
    ]
