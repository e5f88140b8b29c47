"""
Tests for storefront product reviews.
"""
from unittest.mock import patch

import pytest

from apps.core.exceptions import ApiError
from apps.reviews.stores import ProductReviewStore

PRODUCT_ID = '64b7f0c2a1d3e4f5a6b7c8d1'


@pytest.fixture
def reviews(envelope):
    with patch('apps.reviews.stores.ProductReviewService.list_for_product') as mock_list:
        mock_list.return_value = envelope({'reviews': [
            {'_id': 'r1', 'rating': 4, 'userId': {'name': 'Asha'}, 'createdAt': '2024-05-01T00:00:00Z',
             'helpfulCount': 3},
            {'_id': 'r2', 'rating': 5, 'user': 'Ravi', 'createdAt': '2024-05-03T00:00:00Z'},
            {'_id': 'r3', 'rating': 2, 'createdAt': '2024-04-20T00:00:00Z', 'helpfulCount': 3,
             'notHelpfulCount': 2},
        ]})
        store = ProductReviewStore()
        store.fetch_for_product(PRODUCT_ID)
    return store


class TestProductReviewStore:
    """Tests for ProductReviewStore."""

    @patch('apps.reviews.stores.ProductReviewService.list_for_product')
    def test_fetch_params(self, mock_list, envelope):
        mock_list.return_value = envelope({'reviews': []})

        ProductReviewStore().fetch_for_product(PRODUCT_ID, sort='most-helpful', page=2)

        mock_list.assert_called_once_with(PRODUCT_ID, {'sort': 'most-helpful', 'page': 2, 'limit': 20})

    def test_normalized(self, reviews):
        """Test author names and vote counters."""
        assert reviews.get_by_id('r1')['user'] == 'Asha'
        assert reviews.get_by_id('r2')['user'] == 'Ravi'
        assert reviews.get_by_id('r3')['user'] == 'User'
        assert reviews.get_by_id('r2')['helpfulCount'] == 0

    @pytest.mark.parametrize('sort_by, expected', [
        ('newest', ['r2', 'r1', 'r3']),
        ('oldest', ['r3', 'r1', 'r2']),
        ('most-helpful', ['r1', 'r3', 'r2']),
        ('highest-rating', ['r2', 'r1', 'r3']),
        ('lowest-rating', ['r3', 'r1', 'r2']),
    ])
    def test_sorted(self, reviews, sort_by, expected):
        assert [r['id'] for r in reviews.sorted(sort_by)] == expected

    @patch('apps.reviews.stores.ProductReviewService.list_for_product')
    def test_fetch_failure_returns_cache(self, mock_list, reviews):
        mock_list.side_effect = ApiError('Server error', 500)

        result = reviews.fetch_for_product(PRODUCT_ID, sort='oldest')

        assert [r['id'] for r in result] == ['r3', 'r1', 'r2']

    def test_requires_product(self):
        with pytest.raises(ValueError):
            ProductReviewStore().fetch()

    @patch('apps.reviews.stores.ProductReviewService.create')
    def test_submit(self, mock_create, reviews, envelope, toasts):
        mock_create.return_value = envelope({'_id': 'r4', 'rating': 5, 'comment': 'Great'})

        assert reviews.submit(PRODUCT_ID, {'rating': 5, 'comment': 'Great', 'orderId': 'o1'}) is True

        mock_create.assert_called_once_with({
            'productId': PRODUCT_ID, 'orderId': 'o1', 'rating': 5, 'comment': 'Great', 'images': [],
        })
        assert reviews.get_by_id('r4')['user'] == 'User'
        assert ('success', 'Review created successfully') in toasts

    @patch('apps.reviews.stores.ProductReviewService.create')
    def test_submit_invalid_rating(self, mock_create, reviews):
        assert reviews.submit(PRODUCT_ID, {'rating': 6}) is False
        mock_create.assert_not_called()

    @patch('apps.reviews.stores.ProductReviewService.create')
    def test_submit_rejected(self, mock_create, reviews):
        mock_create.side_effect = ApiError('Already reviewed', 409)

        assert reviews.submit(PRODUCT_ID, {'rating': 4}) is False
        assert len(reviews.items) == 3

    @patch('apps.reviews.stores.ProductReviewService.mark_helpful')
    def test_vote_helpful_once(self, mock_helpful, reviews, envelope):
        """Test that the backend tally is used and a second vote is refused."""
        mock_helpful.return_value = envelope({'helpfulCount': 7})

        assert reviews.vote_helpful('r1') is True
        assert reviews.vote_helpful('r1') is False

        mock_helpful.assert_called_once_with('r1')
        assert reviews.get_by_id('r1')['helpfulCount'] == 7
        assert ProductReviewStore().has_voted('r1')

    @patch('apps.reviews.stores.ProductReviewService.mark_helpful')
    def test_vote_helpful_without_tally(self, mock_helpful, reviews, envelope):
        mock_helpful.return_value = envelope(None)

        reviews.vote_helpful('r2')

        assert reviews.get_by_id('r2')['helpfulCount'] == 1

    @patch('apps.reviews.stores.ProductReviewService.mark_helpful')
    def test_vote_helpful_failure(self, mock_helpful, reviews):
        mock_helpful.side_effect = ApiError('Server error', 500)

        assert reviews.vote_helpful('r1') is False
        assert not reviews.has_voted('r1')
        assert reviews.get_by_id('r1')['helpfulCount'] == 3

    def test_vote_not_helpful(self, reviews):
        assert reviews.vote_not_helpful('r3') is True
        assert reviews.vote_not_helpful('r3') is False
        assert reviews.get_by_id('r3')['notHelpfulCount'] == 3
