import logging
import random

from django.core.management.base import BaseCommand, CommandError

from apps.catalog.seed import run_seed

logger = logging.getLogger('apps.catalog.seed')


class Command(BaseCommand):
    help = 'Populate the catalog with sample festival trading-card packs.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--random-seed',
            type=int,
            default=None,
            help='Seed for the price/stock generator, for reproducible runs.',
        )
        parser.add_argument(
            '--images-dir',
            default=None,
            help='Directory holding pack-N.png source images (defaults to SEED_IMAGES_DIR).',
        )

    def handle(self, *args, **options):
        rng = random.Random(options['random_seed'])

        try:
            summary = run_seed(rng=rng, source_dir=options['images_dir'])
        except Exception as exc:
            logger.exception('Seeding failed')
            raise CommandError(f'Seeding failed: {exc}') from exc

        self.stdout.write(self.style.SUCCESS('Sample catalog created successfully!'))
        self.stdout.write(f"   - {summary['brands']} new brands")
        self.stdout.write(f"   - {summary['categories']} new categories")
        self.stdout.write(f"   - {summary['collections']} new collections")
        self.stdout.write(f"   - {summary['pack_types']} new pack types")
        self.stdout.write(f"   - {summary['products']} products")
        self.stdout.write(f"   - {summary['variants']} variants")
