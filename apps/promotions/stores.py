"""
Marketing stores.
"""
from apps.core.exceptions import ClientException
from apps.core.stores import ResourceStore
from apps.core.utils import generate_unique_slug

from .serializers import BannerSerializer, CampaignSerializer, CouponSerializer
from .services import BannerService, CampaignService, CouponService


class CouponStore(ResourceStore):
    """Coupons; new coupons are listed first."""
    label = 'Coupon'
    plural_label = 'coupons'
    list_key = 'coupons'
    insert_position = 'prepend'
    serializer_class = CouponSerializer

    def list_request(self, params):
        return CouponService.list(params)

    def create_request(self, data):
        return CouponService.create(_normalize_coupon(data))

    def update_request(self, item_id, data):
        return CouponService.update(item_id, _normalize_coupon(data))

    def delete_request(self, item_id):
        return CouponService.delete(item_id)


def _normalize_coupon(data):
    if data.get('code'):
        return {**data, 'code': str(data['code']).strip().upper()}
    return data


class BannerStore(ResourceStore):
    """Home sliders and promotional banners."""
    label = 'Banner'
    plural_label = 'banners'
    serializer_class = BannerSerializer

    def list_request(self, params):
        return BannerService.list()

    def create_request(self, data):
        return BannerService.create(data)

    def update_request(self, item_id, data):
        return BannerService.update(item_id, data)

    def delete_request(self, item_id):
        return BannerService.delete(item_id)

    def by_type(self, banner_type=None):
        if not banner_type:
            return self.items
        return [banner for banner in self.items if banner.get('type') == banner_type]

    def reorder(self, banner_ids):
        """Persist a new slider order; cached ``order`` fields follow once confirmed."""
        items = [{'id': str(banner_id), 'order': index} for index, banner_id in enumerate(banner_ids)]
        with self.loading():
            try:
                BannerService.reorder(items)
            except ClientException as e:
                self._fail('reorder', e)
                return False

        positions = {entry['id']: entry['order'] for entry in items}
        reordered = [
            {**banner, 'order': positions[banner['id']]} if banner.get('id') in positions else banner
            for banner in self.items
        ]
        self.items = sorted(reordered, key=lambda banner: banner.get('order', 0))
        self._success('Banner order updated')
        return True


class CampaignStore(ResourceStore):
    """Sales campaigns (flash sales, daily deals, festivals...)."""
    label = 'Campaign'
    plural_label = 'campaigns'
    serializer_class = CampaignSerializer

    def list_request(self, params):
        return CampaignService.list(params)

    def create_request(self, data):
        if not data.get('slug'):
            data = {**data, 'slug': self.generate_slug(data.get('name'))}
        return CampaignService.create(data)

    def update_request(self, item_id, data):
        return CampaignService.update(item_id, data)

    def delete_request(self, item_id):
        return CampaignService.delete(item_id)

    def by_type(self, campaign_type=None):
        if not campaign_type:
            return self.items
        return [campaign for campaign in self.items if campaign.get('type') == campaign_type]

    def generate_slug(self, name):
        """Slug for a campaign name, unique among the cached campaigns."""
        return generate_unique_slug(name, [c.get('slug') for c in self.items if c.get('slug')])
