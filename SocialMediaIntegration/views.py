"""
SocialMediaIntegration Views

Hands generated content to the configured social publisher.
"""

import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from AuditSystem.services import AuditService

from .serializers import SocialPostSerializer
from .services import SocialPublishError, SocialPublishService

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def post_to_social(request):
    """Submit content for publication on a social platform."""
    serializer = SocialPostSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    platform = serializer.validated_data['platform']
    content = serializer.validated_data['content']

    try:
        result = SocialPublishService().publish(request.user, platform, content)
    except SocialPublishError as e:
        AuditService.log_social_operation(
            user=request.user,
            action='social_post_failed',
            status='failure',
            request=request,
            error_message=e.message,
            details={'platform': platform}
        )
        raise

    AuditService.log_social_operation(
        user=request.user,
        action='social_post_submitted',
        status='success',
        request=request,
        resource_id=result.reference or '',
        details={'platform': platform, 'publish_status': result.status}
    )

    return Response(result.to_dict(), status=status.HTTP_202_ACCEPTED)
