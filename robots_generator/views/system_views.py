"""System views for robots_generator"""

from django.conf import settings
from django.http import HttpResponse
from django.urls import reverse


def robots_txt(request):
    """
    Serve this site's own robots.txt based on the indexability setting.

    When the site is indexable the generator page stays crawlable while the
    download and API endpoints are excluded, and the sitemap is advertised.
    """
    if settings.INDEXABLE:
        lines = [
            "User-agent: *",
            "Allow: /",
            f"Disallow: {reverse('generator-download')}",
            "Disallow: /api/",
            "",
            f"Sitemap: {request.build_absolute_uri(reverse('sitemap'))}",
        ]
    else:
        lines = ["User-agent: *", "Disallow: /"]
    return HttpResponse("\n".join(lines), content_type="text/plain")
