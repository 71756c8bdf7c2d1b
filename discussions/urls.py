from django.urls import path

from .views import NodeChildCreateAPIView, NodeListCreateAPIView


urlpatterns = [
    # Forest read / new tree
    path("nodes/", NodeListCreateAPIView.as_view(), name="node-list"),
    # Derive a node from an existing one
    path("nodes/<uuid:parent_id>/children/", NodeChildCreateAPIView.as_view(), name="node-children"),
]
