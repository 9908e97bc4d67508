"""
Module: serializers

This module provides the serializers of the robots.txt generator API.

Classes:
    GenerationSerializer: Validates a strategy, a platform template and an optional sitemap
                          URL, and exposes the composed robots.txt document as `content`.
    CrawlerSerializer: Read-only representation of a crawler catalog entry.
    PlatformSerializer: Read-only representation of a platform template and its rules.
    StrategySerializer: Read-only representation of a strategy and its description.

Usage:
    Use `GenerationSerializer` to validate request data before composing, so that only
    known strategy and platform values ever reach the composer.
"""

from rest_framework import serializers

from .catalog import (
    CrawlerCategory,
    DEFAULT_PLATFORM,
    DEFAULT_STRATEGY,
    Platform,
    Strategy,
    describe_strategy,
    disallows_for,
)
from .composer import GenerationInput, compose
from .forms import SITEMAP_URL_MAX_LENGTH


class GenerationSerializer(serializers.Serializer):
    """
    Serializer for robots.txt generation requests.

    Fields:
        strategy (ChoiceField): Optional, defaults to `maxVisibility`.
        platform (ChoiceField): Optional, defaults to `custom`.
        sitemap_url (CharField): Optional free text, whitespace is preserved.
        content (SerializerMethodField): Read-only. The composed robots.txt document.
    """
    strategy = serializers.ChoiceField(choices=Strategy.choices, default=DEFAULT_STRATEGY.value)
    platform = serializers.ChoiceField(choices=Platform.choices, default=DEFAULT_PLATFORM.value)
    sitemap_url = serializers.CharField(
        allow_blank=True,
        trim_whitespace=False,
        max_length=SITEMAP_URL_MAX_LENGTH,
        default='',
    )
    content = serializers.SerializerMethodField()

    def to_generation_input(self):
        """
        Return the GenerationInput for validated data.

        Must only be called after `is_valid()` returned True.
        """
        data = self.validated_data
        return GenerationInput(
            strategy=data['strategy'],
            platform=data['platform'],
            sitemap_url=data['sitemap_url'],
        )

    def get_content(self, obj):
        """Compose the robots.txt document for the serialized input."""
        return compose(obj)


class CrawlerSerializer(serializers.Serializer):
    """Read-only serializer for crawler catalog entries."""
    user_agent = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    company = serializers.CharField(read_only=True)
    category = serializers.ChoiceField(choices=CrawlerCategory.choices, read_only=True)


class PlatformSerializer(serializers.Serializer):
    """Read-only serializer for a platform template, given as a Platform member."""
    value = serializers.CharField(read_only=True)
    label = serializers.CharField(read_only=True)
    disallow = serializers.SerializerMethodField()

    def get_disallow(self, obj):
        return list(disallows_for(obj))


class StrategySerializer(serializers.Serializer):
    """Read-only serializer for a strategy, given as a Strategy member."""
    value = serializers.CharField(read_only=True)
    label = serializers.CharField(read_only=True)
    description = serializers.SerializerMethodField()

    def get_description(self, obj):
        return describe_strategy(obj)
