"""File hierarchy views."""

import json
import logging
from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from server.apps.authentication.decorators import (
    get_request_token,
    token_required,
)
from server.apps.authentication.logic.session_manager import resolve_optional
from server.apps.files.exceptions import ParentNotFoundError
from server.apps.files.infrastructure.metadata import (
    decode_content,
    detect_mime_type,
)
from server.apps.files.logic.file_operations import (
    create_node,
    get_node,
    get_node_content,
    list_nodes,
)
from server.apps.files.logic.visibility_operations import (
    publish_node,
    unpublish_node,
)
from server.apps.files.models import NodeType
from server.apps.files.serializers import (
    parse_page,
    parse_parent_ref,
    parse_size,
    serialize_node,
)

logger = logging.getLogger(__name__)


def _read_json_body(request: HttpRequest) -> dict[str, Any]:
    """Parse the request body, treating anything but an object as empty."""
    try:
        body = json.loads(request.body or b'{}')
    except ValueError:
        logger.debug('Ignoring malformed JSON body on %s', request.path)
        return {}
    return body if isinstance(body, dict) else {}


@method_decorator(csrf_exempt, name='dispatch')
@method_decorator(token_required, name='dispatch')
class NodeCollectionView(View):
    """List nodes under a parent or upload a new one."""

    http_method_names = ['get', 'post']  # noqa: WPS115

    def get(self, request: HttpRequest, user_id: int) -> JsonResponse:
        """Return one page of the caller's nodes under ``parentId``."""
        try:
            parent = parse_parent_ref(request.GET.get('parentId'))
        except ParentNotFoundError:
            return JsonResponse([], safe=False)

        nodes = list_nodes(
            user_id,
            parent,
            parse_page(request.GET.get('page')),
        )
        return JsonResponse(
            [serialize_node(node) for node in nodes],
            safe=False,
        )

    def post(self, request: HttpRequest, user_id: int) -> JsonResponse:
        """Create a folder, file or image."""
        body = _read_json_body(request)
        node_type = body.get('type')
        # Folders carry no content, whatever the client sent as data
        content = None
        if node_type != NodeType.FOLDER:
            content = decode_content(body.get('data'))

        node = create_node(
            owner_id=user_id,
            name=body.get('name'),
            node_type=node_type,
            parent=parse_parent_ref(body.get('parentId')),
            is_public=body.get('isPublic') is True,
            content=content,
        )
        return JsonResponse(serialize_node(node), status=201)


@require_GET
@token_required
def node_detail(request: HttpRequest, node_id: int, user_id: int) -> JsonResponse:
    """Return one of the caller's nodes."""
    return JsonResponse(serialize_node(get_node(node_id, user_id)))


@csrf_exempt
@require_http_methods(['PUT'])
@token_required
def node_publish(request: HttpRequest, node_id: int, user_id: int) -> JsonResponse:
    """Make one of the caller's nodes public."""
    return JsonResponse(serialize_node(publish_node(node_id, user_id)))


@csrf_exempt
@require_http_methods(['PUT'])
@token_required
def node_unpublish(
    request: HttpRequest,
    node_id: int,
    user_id: int,
) -> JsonResponse:
    """Make one of the caller's nodes private."""
    return JsonResponse(serialize_node(unpublish_node(node_id, user_id)))


@require_GET
def node_data(request: HttpRequest, node_id: int) -> HttpResponse:
    """Serve node content, anonymously for public nodes."""
    node, content = get_node_content(
        node_id,
        requester_id=resolve_optional(get_request_token(request)),
        size=parse_size(request.GET.get('size')),
    )
    return HttpResponse(content, content_type=detect_mime_type(node.name))
