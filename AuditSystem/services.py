"""
Audit trail writer.

Every user-visible operation (sign-in, API key changes, generation, social
posts) is recorded as one AuditLog row. Secrets must never be passed in
``details``.
"""

import logging
import uuid
from typing import Any, Dict, Optional

from django.contrib.auth.models import User
from django.http import HttpRequest

from .models import AuditLog

logger = logging.getLogger(__name__)


def _client_ip(request: HttpRequest) -> Optional[str]:
    forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class AuditService:
    """Records audit rows, one helper per operation category."""

    @staticmethod
    def log_operation(
        user: Optional[User],
        operation_category: str,
        action: str,
        status: str = 'success',
        resource_type: str = '',
        resource_id: str = '',
        details: Optional[Dict[str, Any]] = None,
        error_message: str = '',
        request: Optional[HttpRequest] = None,
        duration_ms: Optional[int] = None,
        request_id: Optional[str] = None
    ) -> AuditLog:
        """
        Write one audit row.

        Anonymous users are stored as NULL. IP address and user agent are
        taken from ``request`` when one is given.
        """
        if user is not None and not user.is_authenticated:
            user = None

        entry = AuditLog.objects.create(
            user=user,
            operation_category=operation_category,
            action=action,
            status=status,
            resource_type=resource_type,
            resource_id=resource_id,
            ip_address=_client_ip(request) if request else None,
            user_agent=request.META.get('HTTP_USER_AGENT', '') if request else '',
            details=details or {},
            error_message=error_message,
            duration_ms=duration_ms,
            request_id=request_id or str(uuid.uuid4())
        )
        logger.debug("Audit %s/%s (%s) for user %s",
                     operation_category, action, status, user.pk if user else None)
        return entry

    @classmethod
    def log_system_operation(cls, user: Optional[User], action: str, **kwargs) -> AuditLog:
        return cls.log_operation(user, 'system', action, **kwargs)

    @classmethod
    def log_auth_operation(cls, user: Optional[User], action: str, **kwargs) -> AuditLog:
        return cls.log_operation(user, 'auth', action, **kwargs)

    @classmethod
    def log_account_operation(cls, user: Optional[User], action: str, **kwargs) -> AuditLog:
        return cls.log_operation(user, 'account', action, **kwargs)

    @classmethod
    def log_credential_operation(cls, user: User, action: str, credential_id: str,
                                 **kwargs) -> AuditLog:
        """Provider API key changes. The key itself is never recorded."""
        return cls.log_operation(
            user, 'credential', action,
            resource_type='UserAPIKey', resource_id=credential_id, **kwargs)

    @classmethod
    def log_content_generation(cls, user: User, action: str, **kwargs) -> AuditLog:
        kwargs.setdefault('resource_type', 'ContentItem')
        return cls.log_operation(user, 'content', action, **kwargs)

    @classmethod
    def log_social_operation(cls, user: User, action: str, **kwargs) -> AuditLog:
        return cls.log_operation(
            user, 'social', action, resource_type='SocialPost', **kwargs)
