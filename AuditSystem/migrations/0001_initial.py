import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('operation_category', models.CharField(choices=[('auth', 'Authentication'), ('account', 'Account Management'), ('credential', 'Provider Credentials'), ('content', 'Content Generation'), ('social', 'Social Publishing'), ('system', 'System Operations')], help_text='Operation category', max_length=20)),
                ('action', models.CharField(choices=[('login', 'User Login'), ('logout', 'User Logout'), ('login_failed', 'Login Failed'), ('account_created', 'Account Created'), ('api_key_created', 'API Key Created'), ('api_key_updated', 'API Key Updated'), ('api_key_deleted', 'API Key Deleted'), ('content_generated', 'Content Generated'), ('content_generation_failed', 'Content Generation Failed'), ('social_post_submitted', 'Social Post Submitted'), ('social_post_failed', 'Social Post Failed'), ('system_error', 'System Error')], help_text='Specific action performed', max_length=50)),
                ('status', models.CharField(choices=[('success', 'Success'), ('failure', 'Failure'), ('pending', 'Pending'), ('error', 'Error')], default='success', help_text='Operation outcome', max_length=10)),
                ('resource_type', models.CharField(blank=True, help_text="Affected resource type (e.g. 'ContentItem', 'UserAPIKey')", max_length=100)),
                ('resource_id', models.CharField(blank=True, help_text='Affected resource ID', max_length=100)),
                ('ip_address', models.GenericIPAddressField(blank=True, help_text='Request IP address', null=True)),
                ('user_agent', models.TextField(blank=True, help_text='User agent string')),
                ('details', models.JSONField(blank=True, default=dict, help_text='Additional operation details')),
                ('error_message', models.TextField(blank=True, help_text='Error message if the operation failed')),
                ('timestamp', models.DateTimeField(default=django.utils.timezone.now, help_text='When the operation happened')),
                ('duration_ms', models.PositiveIntegerField(blank=True, help_text='Operation duration in milliseconds', null=True)),
                ('request_id', models.CharField(blank=True, help_text='Unique request identifier for tracing', max_length=100)),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'audit_logs',
                'ordering': ['-timestamp'],
                'indexes': [
                    models.Index(fields=['user', 'timestamp'], name='audit_user_ts_idx'),
                    models.Index(fields=['operation_category', 'timestamp'], name='audit_category_ts_idx'),
                    models.Index(fields=['action', 'timestamp'], name='audit_action_ts_idx'),
                ],
            },
        ),
    ]
