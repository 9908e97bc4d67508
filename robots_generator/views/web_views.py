"""Web views for robots_generator"""

import logging

from django.http import HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from ..catalog import (
    CrawlerCategory,
    DEFAULT_PLATFORM,
    DEFAULT_STRATEGY,
    STRATEGY_DESCRIPTIONS,
    Strategy,
    crawlers_by_category,
)
from ..composer import compose
from ..forms import GeneratorForm

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = 'robots.txt'


def bind_generator_form(query_params):
    """
    Bind a GeneratorForm to the query parameters, filling in defaults for
    fields that are missing so that a bare page request is valid.
    """
    data = {
        'strategy': DEFAULT_STRATEGY.value,
        'platform': DEFAULT_PLATFORM.value,
        'sitemap_url': '',
    }
    for field in data:
        if field in query_params:
            data[field] = query_params.get(field)
    form = GeneratorForm(data)
    form.is_valid()
    return form


def robots_txt_attachment(content):
    """Wrap a robots.txt document into a plain text download response."""
    response = HttpResponse(content, content_type='text/plain; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename={DOWNLOAD_FILENAME}'
    return response


@require_GET
def generator(request):
    """Render the generator form together with the composed robots.txt."""
    form = bind_generator_form(request.GET)
    if form.errors:
        logger.info("Invalid generator input, using defaults: %s", form.errors.as_json())
    generation_input = form.to_generation_input()

    strategies = [
        {
            'value': strategy.value,
            'label': strategy.label,
            'description': STRATEGY_DESCRIPTIONS[strategy],
        }
        for strategy in Strategy
    ]
    context = {
        'form': form,
        'generation_input': generation_input,
        'robots_txt': compose(generation_input),
        'strategies': strategies,
        'search_crawlers': crawlers_by_category(CrawlerCategory.SEARCH),
        'ai_crawlers': crawlers_by_category(CrawlerCategory.AI),
        'download_filename': DOWNLOAD_FILENAME,
    }
    return render(request, 'web_ui/generator.html', context)


@require_GET
def generator_download(request):
    """Return the composed robots.txt as a file download."""
    form = bind_generator_form(request.GET)
    generation_input = form.to_generation_input()
    logger.debug(
        "Downloading robots.txt (strategy=%s, platform=%s)",
        generation_input.strategy,
        generation_input.platform,
    )
    return robots_txt_attachment(compose(generation_input))
