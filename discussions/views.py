from rest_framework import status
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import CreateChildSerializer, CreateRootSerializer, NodeSerializer
from .services import DiscussionService
from .store import NodeStore


def get_discussion_service():
    return DiscussionService(NodeStore())


class NodeListCreateAPIView(APIView):
    """Anyone may read the forest; starting a new tree needs a logged-in user."""
    permission_classes = [IsAuthenticatedOrReadOnly]

    def get(self, request):
        return Response(get_discussion_service().list_forest())

    def post(self, request):
        serializer = CreateRootSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        node = get_discussion_service().create_root(
            request.user.id, serializer.validated_data["starting_value"]
        )
        return Response(NodeSerializer(node).data, status=status.HTTP_201_CREATED)


class NodeChildCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, parent_id):
        serializer = CreateChildSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        node = get_discussion_service().create_child(
            request.user.id,
            parent_id,
            serializer.validated_data["operation"],
            serializer.validated_data["operand"],
        )
        return Response(NodeSerializer(node).data, status=status.HTTP_201_CREATED)
