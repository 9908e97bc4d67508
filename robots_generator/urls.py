"""
URL configuration for the API application.

This module maps URL paths to views for API endpoints and documentation.

API Endpoints:
- '': Redirect to the documentation landing page.
- 'health/': HealthCheckView for the API health status.
- 'generate/': Generate view composing a robots.txt as JSON.
- 'generate/download/': GenerateDownload view returning the robots.txt as an attachment.
- 'crawlers/': Crawlers view listing the crawler directory.
- 'platforms/': Platforms view listing the platform templates.
- 'strategies/': Strategies view listing the visibility strategies.

Documentation:
- 'docs/': APIDocsLandingPageView for the documentation landing page.
- 'docs/schema/': SpectacularAPIView for the OpenAPI schema.
- 'docs/swagger/': SpectacularSwaggerView for Swagger UI.
- 'docs/redoc/': SpectacularRedocView for ReDoc UI.

Dependencies:
- drf_spectacular for API documentation.
- Django for URL routing and view handling.
"""

from django.urls import path, include
from django.views.generic import RedirectView

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views.api_views import (
    APIDocsLandingPageView,
    Crawlers,
    Generate,
    GenerateDownload,
    HealthCheckView,
    Platforms,
    Strategies,
)

app_name = "robots_generator"

urlpatterns = [
   # API URLs
    path('v1/', include([
        # API Endpoints
        path('', RedirectView.as_view(url='docs/', permanent=True), name='redirect_to_docs'),
        path('health/', HealthCheckView.as_view(), name='health_check'),
        path('generate/', Generate.as_view(), name='generate'),
        path('generate/download/', GenerateDownload.as_view(), name='generate_download'),
        path('crawlers/', Crawlers.as_view(), name='crawler_list'),
        path('platforms/', Platforms.as_view(), name='platform_list'),
        path('strategies/', Strategies.as_view(), name='strategy_list'),

        # Documentation
        path('docs/', APIDocsLandingPageView.as_view(), name='api_docs_landing'),
        path('docs/schema/', SpectacularAPIView.as_view(), name='schema'),
        path('docs/swagger/', SpectacularSwaggerView.as_view(url_name='robots_generator:schema'), name='swagger_ui'),
        path('docs/redoc/', SpectacularRedocView.as_view(url_name='robots_generator:schema'), name='redoc_ui'),
    ])),
]
