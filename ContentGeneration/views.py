import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from AuditSystem.services import AuditService

from .exceptions import ContentStudioError
from .serializers import ContentGenerationRequestSerializer, ContentItemSerializer
from .services.content_repository import ContentRepository
from .services.generation_service import build_generation_service
from .services.provider_router import catalog_as_dicts

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def generate_content(request):
    """Generate content for a prompt with the selected model and save it."""
    serializer = ContentGenerationRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    prompt = serializer.validated_data['prompt']
    model_id = serializer.validated_data['model']

    try:
        item = build_generation_service().generate(request.user, prompt, model_id)
    except ContentStudioError as e:
        AuditService.log_content_generation(
            user=request.user,
            action='content_generation_failed',
            status='failure',
            request=request,
            error_message=e.message,
            details={'model': model_id, 'code': e.code}
        )
        raise

    AuditService.log_content_generation(
        user=request.user,
        action='content_generated',
        status='success',
        request=request,
        resource_id=str(item.id),
        details={'model': item.model, 'type': item.type}
    )

    return Response({'content': item.content})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_content(request):
    """The caller's generated content, oldest first."""
    items = ContentRepository().list_by_user(request.user)
    return Response(ContentItemSerializer(items, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_models(request):
    """Providers and models the client can offer in its model picker."""
    return Response(catalog_as_dicts())
