from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone


class AuditLog(models.Model):
    """Audit log for user-facing operations"""

    OPERATION_CHOICES = [
        ('auth', 'Authentication'),
        ('account', 'Account Management'),
        ('credential', 'Provider Credentials'),
        ('content', 'Content Generation'),
        ('social', 'Social Publishing'),
        ('system', 'System Operations'),
    ]

    ACTION_CHOICES = [
        # Authentication
        ('login', 'User Login'),
        ('logout', 'User Logout'),
        ('login_failed', 'Login Failed'),

        # Account Management
        ('account_created', 'Account Created'),

        # Provider Credentials
        ('api_key_created', 'API Key Created'),
        ('api_key_updated', 'API Key Updated'),
        ('api_key_deleted', 'API Key Deleted'),

        # Content Generation
        ('content_generated', 'Content Generated'),
        ('content_generation_failed', 'Content Generation Failed'),

        # Social Publishing
        ('social_post_submitted', 'Social Post Submitted'),
        ('social_post_failed', 'Social Post Failed'),

        # System Operations
        ('system_error', 'System Error'),
    ]

    STATUS_CHOICES = [
        ('success', 'Success'),
        ('failure', 'Failure'),
        ('pending', 'Pending'),
        ('error', 'Error'),
    ]

    # Core fields
    user = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True,
                             related_name='audit_logs', help_text="User who performed the action")
    operation_category = models.CharField(max_length=20, choices=OPERATION_CHOICES,
                                          help_text="Operation category")
    action = models.CharField(max_length=50, choices=ACTION_CHOICES,
                              help_text="Specific action performed")
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='success',
                              help_text="Operation outcome")

    # Contextual information
    resource_type = models.CharField(max_length=100, blank=True,
                                     help_text="Affected resource type (e.g. 'ContentItem', 'UserAPIKey')")
    resource_id = models.CharField(max_length=100, blank=True,
                                   help_text="Affected resource ID")
    ip_address = models.GenericIPAddressField(null=True, blank=True,
                                              help_text="Request IP address")
    user_agent = models.TextField(blank=True, help_text="User agent string")

    # Detailed information
    details = models.JSONField(default=dict, blank=True,
                               help_text="Additional operation details")
    error_message = models.TextField(
        blank=True, help_text="Error message if the operation failed")

    # Metadata
    timestamp = models.DateTimeField(
        default=timezone.now, help_text="When the operation happened")
    duration_ms = models.PositiveIntegerField(null=True, blank=True,
                                              help_text="Operation duration in milliseconds")
    request_id = models.CharField(max_length=100, blank=True,
                                  help_text="Unique request identifier for tracing")

    class Meta:
        db_table = 'audit_logs'
        ordering = ['-timestamp']
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='audit_user_ts_idx'),
            models.Index(fields=['operation_category', 'timestamp'],
                         name='audit_category_ts_idx'),
            models.Index(fields=['action', 'timestamp'], name='audit_action_ts_idx'),
        ]

    def __str__(self):
        user_info = f"User {self.user.username}" if self.user else "Anonymous"
        return f"{user_info} - {self.get_action_display()} - {self.status} at {self.timestamp}"
