"""API views for robots_generator"""
import logging

from django.views.generic import TemplateView

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from rest_framework import status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from ..catalog import CRAWLERS, CrawlerCategory, Platform, Strategy
from ..composer import compose
from ..serializers import (
    CrawlerSerializer,
    GenerationSerializer,
    PlatformSerializer,
    StrategySerializer,
)
from .web_views import robots_txt_attachment

logger = logging.getLogger(__name__)

GENERATION_PARAMETERS = [
    OpenApiParameter(
        name='strategy',
        description='Visibility strategy: one of ' + ', '.join(Strategy.values),
        required=False,
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        enum=Strategy.values,
    ),
    OpenApiParameter(
        name='platform',
        description='Platform template: one of ' + ', '.join(Platform.values),
        required=False,
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
        enum=Platform.values,
    ),
    OpenApiParameter(
        name='sitemap_url',
        description='Optional sitemap URL, omitted from the output when blank',
        required=False,
        type=OpenApiTypes.STR,
        location=OpenApiParameter.QUERY,
    ),
]

class APIDocsLandingPageView(TemplateView):
    """Landing page for API documentation."""
    template_name = "api_docs/index.html"

def extend_schema_with_429(**kwargs):
    """
    Decorator that merges a 429 response into the responses dict for extend_schema.
    """
    responses = kwargs.pop('responses', {})
    responses = {
        **responses,
        429: OpenApiResponse(description="Rate limit exceeded. Too many requests."),
    }
    return extend_schema(responses=responses, **kwargs)

def _generate(data):
    """
    Validate generation request data.

    Returns:
        tuple: (GenerationInput, None) on success or (None, errors) on failure.
    """
    serializer = GenerationSerializer(data=data)
    if serializer.is_valid():
        return serializer.to_generation_input(), None
    return None, serializer.errors

class HealthCheckView(APIView):
    """API health check endpoint."""
    @extend_schema_with_429(
        summary="Health Check",
        description="Returns the health status of the API.",
        responses={
            200: {
                'type': 'object',
                'properties': {
                    'status': {
                        'type': 'string',
                        'example': 'ok',
                        'description': 'Indicates that the API is healthy.'
                    }
                }
            }
        }
    )
    def get(self, request, *args, **kwargs):
        """Return the health status of the API.

        Returns:
            Response: JSON object with status 'ok'.
        """
        return Response({'status': 'ok'}, status=200)

class Generate(APIView):
    """Endpoint for composing a robots.txt document."""
    parser_classes = (JSONParser, FormParser, MultiPartParser)

    @extend_schema_with_429(
        summary='Generate a robots.txt',
        description=(
            'Composes a robots.txt document for the given visibility strategy and platform '
            'template. Missing parameters fall back to `maxVisibility` and `custom`.'
        ),
        parameters=GENERATION_PARAMETERS,
        responses={
            200: GenerationSerializer,
            400: OpenApiResponse(description='Unknown strategy or platform'),
        }
    )
    def get(self, request, *args, **kwargs):
        """Compose a robots.txt from query parameters.

        Returns:
            Response: The generation input echoed back with the composed `content`.
        """
        return self._respond(request.query_params)

    @extend_schema_with_429(
        summary='Generate a robots.txt',
        description='Composes a robots.txt document from a JSON or form-encoded body.',
        request=GenerationSerializer,
        responses={
            200: GenerationSerializer,
            400: OpenApiResponse(description='Unknown strategy or platform'),
        }
    )
    def post(self, request, *args, **kwargs):
        """Compose a robots.txt from the request body.

        Returns:
            Response: The generation input echoed back with the composed `content`.
        """
        return self._respond(request.data)

    def _respond(self, data):
        generation_input, errors = _generate(data)
        if errors:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)
        logger.debug(
            "Generated robots.txt via API (strategy=%s, platform=%s)",
            generation_input.strategy,
            generation_input.platform,
        )
        return Response(GenerationSerializer(generation_input).data, status=status.HTTP_200_OK)

class GenerateDownload(APIView):
    """Endpoint for downloading a composed robots.txt document."""
    @extend_schema_with_429(
        summary='Download a robots.txt',
        description='Composes a robots.txt document and returns it as a `robots.txt` attachment.',
        parameters=GENERATION_PARAMETERS,
        responses={
            (200, 'text/plain'): OpenApiResponse(description='The robots.txt file'),
            400: OpenApiResponse(description='Unknown strategy or platform'),
        }
    )
    def get(self, request, *args, **kwargs):
        """Download a composed robots.txt.

        Returns:
            HttpResponse: The document as a text/plain attachment, or error message.
        """
        generation_input, errors = _generate(request.query_params)
        if errors:
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)
        return robots_txt_attachment(compose(generation_input))

class Crawlers(APIView):
    """Endpoint for listing the known crawlers."""
    @extend_schema_with_429(
        summary='List crawlers',
        description=(
            'Returns the crawler directory in the order the crawlers are emitted, '
            'optionally filtered by category.'
        ),
        parameters=[
            OpenApiParameter(
                name='category',
                description='Crawler category: one of ' + ', '.join(CrawlerCategory.values),
                required=False,
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=CrawlerCategory.values,
            )
        ],
        responses={
            200: CrawlerSerializer(many=True),
            400: OpenApiResponse(description='Unknown category'),
        }
    )
    def get(self, request, *args, **kwargs):
        """List the crawler directory.

        Returns:
            Response: List of crawlers or error message.
        """
        category = request.query_params.get('category', '')
        crawlers = CRAWLERS
        if category:
            if category not in CrawlerCategory.values:
                return Response(
                    {'error': f'Unknown crawler category \'{category}\'.'},
                    status=status.HTTP_400_BAD_REQUEST
                )
            crawlers = [crawler for crawler in CRAWLERS if crawler.category == category]
        return Response(CrawlerSerializer(crawlers, many=True).data, status=status.HTTP_200_OK)

class Platforms(APIView):
    """Endpoint for listing the platform templates."""
    @extend_schema_with_429(
        summary='List platform templates',
        description='Returns every platform template with its disallowed paths.',
        responses={200: PlatformSerializer(many=True)}
    )
    def get(self, request, *args, **kwargs):
        return Response(PlatformSerializer(list(Platform), many=True).data, status=status.HTTP_200_OK)

class Strategies(APIView):
    """Endpoint for listing the visibility strategies."""
    @extend_schema_with_429(
        summary='List visibility strategies',
        description='Returns every visibility strategy with its description.',
        responses={200: StrategySerializer(many=True)}
    )
    def get(self, request, *args, **kwargs):
        return Response(StrategySerializer(list(Strategy), many=True).data, status=status.HTTP_200_OK)
