import logging

from allauth.account.signals import user_signed_up
from django.contrib.auth.signals import (
    user_logged_in,
    user_logged_out,
    user_login_failed,
)
from django.utils.deprecation import MiddlewareMixin

from .services import AuditService

logger = logging.getLogger(__name__)


class AuditMiddleware(MiddlewareMixin):
    """Middleware to automatically log authentication events and view errors"""

    def __init__(self, get_response):
        super().__init__(get_response)
        self._setup_signal_handlers()

    def _setup_signal_handlers(self):
        """Set up signal handlers for automatic audit logging"""
        user_logged_in.connect(
            _handle_user_logged_in, dispatch_uid='audit_user_logged_in')
        user_logged_out.connect(
            _handle_user_logged_out, dispatch_uid='audit_user_logged_out')
        user_login_failed.connect(
            _handle_user_login_failed, dispatch_uid='audit_user_login_failed')
        user_signed_up.connect(
            _handle_user_signed_up, dispatch_uid='audit_user_signed_up')

    def process_exception(self, request, exception):
        """Log exceptions that escape views for authenticated requests"""
        user = getattr(request, 'user', None)
        if user and user.is_authenticated:
            AuditService.log_system_operation(
                action='system_error',
                status='error',
                user=user,
                request=request,
                error_message=str(exception),
                details={
                    'view': request.resolver_match.view_name if request.resolver_match else 'unknown',
                    'method': request.method,
                    'path': request.path,
                    'exception_type': type(exception).__name__
                }
            )


def _handle_user_logged_in(sender, request, user, **kwargs):
    """Handle successful user login"""
    AuditService.log_auth_operation(
        user=user,
        action='login',
        status='success',
        request=request,
        details={'has_password': user.has_usable_password()}
    )


def _handle_user_logged_out(sender, request, user, **kwargs):
    """Handle user logout"""
    AuditService.log_auth_operation(
        user=user,
        action='logout',
        status='success',
        request=request
    )


def _handle_user_login_failed(sender, credentials, request=None, **kwargs):
    """Handle failed login attempts"""
    username = credentials.get('username') or credentials.get('email') or 'unknown'
    logger.info("Failed login attempt for %s", username)
    AuditService.log_auth_operation(
        user=None,
        action='login_failed',
        status='failure',
        request=request,
        details={'attempted_username': username},
        error_message='Invalid login credentials'
    )


def _handle_user_signed_up(sender, request, user, **kwargs):
    """Handle user registration, both local and federated"""
    sociallogin = kwargs.get('sociallogin')
    AuditService.log_account_operation(
        user=user,
        action='account_created',
        status='success',
        request=request,
        details={
            'signup_method': sociallogin.account.provider if sociallogin else 'password'
        }
    )
