from rest_framework import serializers

from .models import Node, Operation
from .tree import VALUE_MAX_DIGITS


class NodeSerializer(serializers.ModelSerializer):
    parent_id = serializers.UUIDField(read_only=True, allow_null=True)
    author_id = serializers.UUIDField(read_only=True)
    author = serializers.CharField(source="author.username", read_only=True)

    class Meta:
        model = Node
        fields = ["id", "value", "operation", "operand", "parent_id", "author_id", "author", "created_at"]


class CreateRootSerializer(serializers.Serializer):
    starting_value = serializers.DecimalField(max_digits=VALUE_MAX_DIGITS, decimal_places=10)


class CreateChildSerializer(serializers.Serializer):
    operation = serializers.ChoiceField(choices=Operation.choices)
    operand = serializers.DecimalField(max_digits=VALUE_MAX_DIGITS, decimal_places=10)
