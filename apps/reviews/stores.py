"""
Review stores.
"""
from django.utils import timezone

from apps.core.exceptions import ClientException
from apps.core.routing import ADMIN, VENDOR
from apps.core.stores import ResourceStore
from apps.core.utils import unwrap

from .serializers import ProductReviewSerializer
from .services import ProductReviewService, ReviewService, VendorReviewService

ADMIN_STATUSES = ('approved', 'rejected', 'pending')
VENDOR_STATUSES = ('approved', 'pending', 'hidden')


class ReviewStore(ResourceStore):
    """
    Product reviews for moderation.
    The admin console can delete reviews, the vendor console can answer them.
    """
    label = 'Review'
    plural_label = 'reviews'
    list_key = 'reviews'
    merge_updates = True

    def __init__(self, role=ADMIN, **kwargs):
        super().__init__(**kwargs)
        if role not in (ADMIN, VENDOR):
            raise ValueError(f'Reviews are not moderated by role {role}')
        self.role = role
        self.service = ReviewService if role == ADMIN else VendorReviewService

    @property
    def statuses(self):
        return ADMIN_STATUSES if self.role == ADMIN else VENDOR_STATUSES

    def list_request(self, params):
        return self.service.list(params)

    def delete_request(self, item_id):
        if self.role != ADMIN:
            raise ValueError('Only the admin console deletes reviews')
        return ReviewService.delete(item_id)

    def update_status(self, review_id, status):
        """Moderate a review; the cached review shows ``status`` once confirmed."""
        if status not in self.statuses:
            raise ValueError(f'Unknown review status: {status}')

        with self.loading():
            try:
                body = self.service.update_status(review_id, status)
            except ClientException as e:
                self._fail('update_status', e)
                return False

        payload = unwrap(body)
        confirmed = {**payload, 'status': status} if isinstance(payload, dict) else None
        self.apply_update(review_id, confirmed, {'status': status})
        self._success(f'Review {status}')
        return True

    def respond(self, review_id, response):
        """Publish the vendor's answer to a review."""
        if self.role != VENDOR:
            raise ValueError('Only the vendor console answers reviews')

        with self.loading():
            try:
                body = VendorReviewService.add_response(review_id, response)
            except ClientException as e:
                self._fail('respond', e)
                return False

        self.apply_update(review_id, unwrap(body), {'vendorResponse': response})
        self._success('Response saved')
        return True


REVIEW_SORTS = {
    'newest': (lambda review: review['date'], True),
    'oldest': (lambda review: review['date'], False),
    'most-helpful': (lambda review: (review['helpfulCount'], -review['notHelpfulCount']), True),
    'highest-rating': (lambda review: review.get('rating') or 0, True),
    'lowest-rating': (lambda review: review.get('rating') or 0, False),
}


class ProductReviewStore(ResourceStore):
    """
    Reviews of one product on the storefront.
    Each customer votes at most once per review; votes survive restarts.
    """
    label = 'Review'
    plural_label = 'reviews'
    list_key = 'reviews'
    serializer_class = ProductReviewSerializer
    votes_key = 'review-votes'

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.product_id = None
        self.votes = self.storage.get_item(self.votes_key) or {}

    def list_request(self, params):
        if self.product_id is None:
            raise ValueError('Select a product before loading its reviews')
        return ProductReviewService.list_for_product(self.product_id, params)

    def create_request(self, data):
        return ProductReviewService.create(data)

    def normalize(self, item):
        item = super().normalize(item)
        author = item.get('userId')
        return {
            **item,
            'user': item.get('user') or (author.get('name') if isinstance(author, dict) else None) or 'User',
            'date': item.get('date') or item.get('createdAt') or timezone.now().isoformat(),
            'helpfulCount': item.get('helpfulCount') or 0,
            'notHelpfulCount': item.get('notHelpfulCount') or 0,
        }

    def fetch_for_product(self, product_id, sort='newest', page=1, limit=20):
        """Load the reviews of a product; the cached ones are returned sorted on failure."""
        if self.product_id != product_id:
            self.items = []
        self.product_id = product_id
        if self.fetch({'sort': sort, 'page': page, 'limit': limit}) is None:
            return self.sorted(sort)
        return self.items

    def submit(self, product_id, data):
        """Post a review; returns True once the backend accepted it."""
        payload = {
            'productId': str(product_id),
            'orderId': data.get('orderId'),
            'rating': data.get('rating'),
            'comment': data.get('comment', ''),
            'images': data.get('images') or [],
        }
        return self.create(payload) is not None

    def has_voted(self, review_id):
        return str(review_id) in self.votes

    def vote_helpful(self, review_id):
        """Count a helpful vote; the backend's tally wins over the local one."""
        if self.has_voted(review_id):
            return False

        with self.loading():
            try:
                body = ProductReviewService.mark_helpful(review_id)
            except ClientException as e:
                self._fail('vote_helpful', e)
                return False

        payload = unwrap(body)
        count = payload.get('helpfulCount') if isinstance(payload, dict) else None
        review = self.get_by_id(review_id)
        if review is not None:
            if not isinstance(count, int):
                count = review['helpfulCount'] + 1
            self.apply_update(review_id, None, {'helpfulCount': count})
        self._record_vote(review_id, 'helpful')
        return True

    def vote_not_helpful(self, review_id):
        """Not-helpful votes are only counted locally."""
        review = self.get_by_id(review_id)
        if self.has_voted(review_id) or review is None:
            return False
        self.apply_update(review_id, None, {'notHelpfulCount': review['notHelpfulCount'] + 1})
        self._record_vote(review_id, 'not-helpful')
        return True

    def sorted(self, sort_by='newest'):
        if sort_by not in REVIEW_SORTS:
            return list(self.items)
        key, reverse = REVIEW_SORTS[sort_by]
        return sorted(self.items, key=key, reverse=reverse)

    def _record_vote(self, review_id, vote):
        self.votes = {**self.votes, str(review_id): vote}
        self.storage.set_item(self.votes_key, self.votes)
