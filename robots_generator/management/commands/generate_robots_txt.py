"""
Management command to compose a robots.txt document from the command line.

This command renders the same document as the generator page for a given
visibility strategy, platform template and optional sitemap URL, and writes it
to a file or to standard output.

Usage:
    python manage.py generate_robots_txt --strategy aiOnly --platform wordpress \
        --sitemap-url https://example.com/sitemap.xml --output public/robots.txt
"""

import logging
import os

from django.core.management.base import BaseCommand

from robots_generator.catalog import DEFAULT_PLATFORM, DEFAULT_STRATEGY, Platform, Strategy
from robots_generator.composer import GenerationInput, compose

logger = logging.getLogger(__name__)

class Command(BaseCommand):
    """
    Django management command to generate a robots.txt file.

    Writes the composed document to the path given by --output, creating the
    destination directory if needed, or to stdout when no path is given.
    """

    help = "Compose a robots.txt for a visibility strategy and platform template"

    def add_arguments(self, parser):
        parser.add_argument(
            '--strategy',
            choices=Strategy.values,
            default=DEFAULT_STRATEGY.value,
            help="Visibility strategy (default: %(default)s)",
        )
        parser.add_argument(
            '--platform',
            choices=Platform.values,
            default=DEFAULT_PLATFORM.value,
            help="Platform template (default: %(default)s)",
        )
        parser.add_argument(
            '--sitemap-url',
            default='',
            help="Sitemap URL to advertise, omitted when blank",
        )
        parser.add_argument(
            '--output',
            default=None,
            help="File to write; prints to stdout when omitted",
        )

    def handle(self, *args, **options):
        """
        Entry point for the management command.

        Raises:
            OSError: If writing the output file fails.
        """
        content = compose(GenerationInput(
            strategy=options['strategy'],
            platform=options['platform'],
            sitemap_url=options['sitemap_url'],
        ))

        dest_path = options['output']
        if not dest_path:
            self.stdout.write(content)
            return

        dest_dir = os.path.dirname(dest_path)
        if dest_dir:
            os.makedirs(dest_dir, exist_ok=True)
        with open(dest_path, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.info("Wrote robots.txt to %s", dest_path)
        self.stdout.write(self.style.SUCCESS(f"robots.txt written to {dest_path}"))
