# apps/gateway/serializers.py
from rest_framework import serializers


class HeaderContractSerializer(serializers.Serializer):
    headers = serializers.DictField(child=serializers.CharField())


class GatewayContextSerializer(serializers.Serializer):
    company_id = serializers.CharField(allow_blank=True)
    user_id = serializers.CharField(allow_blank=True)
    user_role = serializers.CharField(allow_blank=True)
    source = serializers.CharField(allow_blank=True)
    timestamp = serializers.CharField(allow_blank=True)
    request_id = serializers.CharField(allow_blank=True)
    is_identified = serializers.BooleanField()
