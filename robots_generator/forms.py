"""Forms for the robots.txt generator web UI."""

from django import forms

from .catalog import DEFAULT_PLATFORM, DEFAULT_STRATEGY, Platform, Strategy
from .composer import GenerationInput

SITEMAP_URL_MAX_LENGTH = 2048


class GeneratorForm(forms.Form):
    """
    Form backing the generator page.

    The sitemap URL is rendered as a URL input but accepted as free text;
    whitespace is kept so that the composer decides whether it is blank.
    """
    strategy = forms.ChoiceField(
        choices=Strategy.choices,
        initial=DEFAULT_STRATEGY,
        widget=forms.RadioSelect,
        label='Visibility Strategy',
    )
    platform = forms.ChoiceField(
        choices=Platform.choices,
        initial=DEFAULT_PLATFORM,
        label='Platform Template',
    )
    sitemap_url = forms.CharField(
        required=False,
        strip=False,
        max_length=SITEMAP_URL_MAX_LENGTH,
        label='Sitemap URL (optional)',
        widget=forms.URLInput(attrs={'placeholder': 'https://example.com/sitemap.xml'}),
    )

    def to_generation_input(self):
        """
        Build the GenerationInput from cleaned data, falling back to the
        defaults for any field that failed validation.
        """
        data = getattr(self, 'cleaned_data', {})
        return GenerationInput(
            strategy=data.get('strategy', DEFAULT_STRATEGY),
            platform=data.get('platform', DEFAULT_PLATFORM),
            sitemap_url=data.get('sitemap_url', ''),
        )
