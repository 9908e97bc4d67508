"""
URL configuration for the robots.txt generator project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/

Routes:
    ''              -- the generator form and its composed robots.txt
    'download/'     -- the composed robots.txt as a file download
    'api/'          -- the JSON API, see robots_generator.urls
    'robots.txt'    -- this site's own robots.txt
    'sitemap.xml'   -- this site's sitemap, only when INDEXABLE is set
"""
from django.conf import settings
from django.http import HttpResponseNotFound
from django.contrib.sitemaps.views import sitemap
from django.urls import include, path

from robots_generator.sitemaps import StaticViewSitemap
from robots_generator.views.system_views import robots_txt
from robots_generator.views.web_views import generator, generator_download

sitemaps = {
    'static': StaticViewSitemap,
}

def guarded_sitemap_view(request, *args, **kwargs):
    """
    Return the sitemap if INDEXABLE is True, else return 404.
    """
    if not settings.INDEXABLE:
        return HttpResponseNotFound("Sitemap is disabled.")
    return sitemap(request, *args, **kwargs)

urlpatterns = [

    path('', generator, name='generator'),
    path('download/', generator_download, name='generator-download'),

    path('api/', include('robots_generator.urls')),

    path('robots.txt', robots_txt, name='robots_txt'),
    path('sitemap.xml', guarded_sitemap_view, {'sitemaps': sitemaps}, name='sitemap'),
]
