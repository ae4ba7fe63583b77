import uuid
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ScheduledCall',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('owner_id', models.CharField(max_length=255)),
                ('organization_id', models.CharField(blank=True, max_length=255, null=True)),
                ('title', models.CharField(blank=True, default='', max_length=255)),
                ('description', models.TextField(blank=True, default='Scheduled Meeting')),
                ('starts_at', models.DateTimeField()),
                ('ends_at', models.DateTimeField()),
                ('created_on', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'scheduled_calls',
                'ordering': ['starts_at'],
            },
        ),
        migrations.AddIndex(
            model_name='scheduledcall',
            index=models.Index(fields=['owner_id', 'organization_id', 'starts_at'], name='calls_scope_start_idx'),
        ),
    ]
