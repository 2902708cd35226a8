"""
Receipt serializers for decoding submissions and describing responses.
"""
from rest_framework import serializers

from ..models import Item, Receipt


class ReceiptTextField(serializers.CharField):
    """
    A JSON string kept exactly as submitted.

    Numbers and booleans are rejected instead of being converted to text,
    and null decodes as ''.
    """

    def validate_empty_values(self, data):
        if data is None:
            return (True, '')
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return data


def _text_field(**kwargs):
    """Text field; absent or null fields decode as ''"""
    return ReceiptTextField(default='', allow_blank=True, trim_whitespace=False, **kwargs)


class ItemSerializer(serializers.Serializer):
    """Serializer for a single receipt item"""
    shortDescription = _text_field(source='short_description')
    price = _text_field()


class ReceiptSerializer(serializers.Serializer):
    """
    Decodes the submission body into a Receipt.

    Only the shape is checked here (object with text fields and a list of
    item objects). Field contents are checked by validate_receipt.
    Used for: POST /receipts/process
    """
    retailer = _text_field()
    purchaseDate = _text_field(source='purchase_date')
    purchaseTime = _text_field(source='purchase_time')
    items = ItemSerializer(many=True, default=list, allow_null=True)
    total = _text_field()

    def create(self, validated_data):
        # A null list or a null entry decodes as empty
        items = tuple(
            Item(**item) if item else Item()
            for item in validated_data.pop('items') or ()
        )
        return Receipt(items=items, **validated_data)


class ProcessReceiptResponseSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)


class PointsResponseSerializer(serializers.Serializer):
    points = serializers.IntegerField(read_only=True)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField(read_only=True)
