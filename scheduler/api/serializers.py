from rest_framework import serializers


class RawField(serializers.Field):
    """Passes the value through untouched; the domain decides what is valid."""

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


class CardSidesMixin:
    # Sides are matched verbatim, so they are not trimmed, only checked for blanks
    sides = ("cardFront", "cardBack")

    def validate(self, attrs):
        for side in self.sides:
            if not attrs[side].strip():
                raise serializers.ValidationError({side: "This field may not be blank."})
        return attrs


class UpdateInSerializer(CardSidesMixin, serializers.Serializer):
    cardFront = serializers.CharField(trim_whitespace=False)
    cardBack = serializers.CharField(trim_whitespace=False)
    difficulty = RawField(allow_null=True)


class HintQuerySerializer(CardSidesMixin, serializers.Serializer):
    cardFront = serializers.CharField(trim_whitespace=False)
    cardBack = serializers.CharField(trim_whitespace=False)


class CardInSerializer(CardSidesMixin, serializers.Serializer):
    sides = ("front", "back")

    front = serializers.CharField(trim_whitespace=False)
    back = serializers.CharField(trim_whitespace=False)
    hint = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    tags = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class CardOutSerializer(serializers.Serializer):
    front = serializers.CharField()
    back = serializers.CharField()
    hint = serializers.CharField(allow_null=True)
    tags = serializers.ListField(child=serializers.CharField())
