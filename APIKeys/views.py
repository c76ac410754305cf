import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from AuditSystem.services import AuditService

from .serializers import (
    SetAPIKeySerializer,
    UpdateAPIKeySerializer,
    UserAPIKeySerializer,
)
from .services import CredentialStore

logger = logging.getLogger(__name__)


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def api_keys(request):
    """
    GET: list the caller's provider API keys (secrets masked).
    POST: store a key for a provider, replacing any existing one.
    """
    store = CredentialStore()

    if request.method == 'GET':
        credentials = store.list_for_user(request.user)
        return Response(UserAPIKeySerializer(credentials, many=True).data)

    serializer = SetAPIKeySerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    credential, created = store.create(
        request.user,
        serializer.validated_data['provider'],
        serializer.validated_data['api_key'],
    )

    AuditService.log_credential_operation(
        user=request.user,
        action='api_key_created' if created else 'api_key_updated',
        credential_id=str(credential.id),
        request=request,
        details={'provider': credential.provider}
    )

    return Response(
        UserAPIKeySerializer(credential).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@api_view(['PATCH', 'DELETE'])
@permission_classes([IsAuthenticated])
def api_key_detail(request, pk):
    """
    PATCH: replace the secret of one of the caller's keys.
    DELETE: remove one of the caller's keys.
    """
    store = CredentialStore()

    if request.method == 'PATCH':
        serializer = UpdateAPIKeySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        credential = store.update(
            request.user, pk, serializer.validated_data['api_key'])

        AuditService.log_credential_operation(
            user=request.user,
            action='api_key_updated',
            credential_id=str(pk),
            request=request,
            details={'provider': credential.provider}
        )
        return Response(UserAPIKeySerializer(credential).data)

    credential = store.delete(request.user, pk)

    AuditService.log_credential_operation(
        user=request.user,
        action='api_key_deleted',
        credential_id=str(pk),
        request=request,
        details={'provider': credential.provider}
    )
    return Response({'success': True, 'message': 'API key removed'})
