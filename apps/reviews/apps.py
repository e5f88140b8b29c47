from django.apps import AppConfig


class ReviewsConfig(AppConfig):
    name = 'apps.reviews'
    verbose_name = 'Reviews'
