"""
Image uploads.
Multipart submissions to the role's upload endpoint, answered with the hosted URL.
"""
import os

from .exceptions import InvalidResponseError
from .http import api_client
from .routing import ADMIN, VENDOR
from .utils import unwrap

UPLOAD_ENDPOINTS = {
    ADMIN: '/admin/uploads/image',
    VENDOR: '/vendor/uploads/image',
}


class UploadService:
    """Upload endpoints."""

    @staticmethod
    def upload_image(file, role=ADMIN, folder='general', public_id=None, filename=None):
        """
        Upload one image and return the hosted URL.
        ``file`` is a binary file object or raw bytes.
        """
        try:
            url = UPLOAD_ENDPOINTS[role]
        except KeyError:
            raise ValueError(f'Role {role} cannot upload images')

        name = filename or os.path.basename(getattr(file, 'name', '') or 'image')
        form = {'folder': folder}
        if public_id:
            form['publicId'] = public_id

        body = api_client().post(url, data=form, files={'image': (name, file)})
        return hosted_url(body)

    @staticmethod
    def upload_vendor_images(files, folder='products'):
        """Upload several images from the vendor console; returns the hosted URLs."""
        parts = [
            ('images', (os.path.basename(getattr(f, 'name', '') or f'image-{i}'), f))
            for i, f in enumerate(files)
        ]
        body = api_client().post('/vendor/uploads/images', data={'folder': folder}, files=parts)
        payload = unwrap(body)
        if isinstance(payload, list):
            return [item['url'] if isinstance(item, dict) else item for item in payload]
        if isinstance(payload, dict) and isinstance(payload.get('urls'), list):
            return payload['urls']
        raise InvalidResponseError('Upload response did not contain image URLs')


def hosted_url(body):
    payload = unwrap(body)
    if isinstance(payload, dict) and payload.get('url'):
        return payload['url']
    if isinstance(payload, str) and payload:
        return payload
    raise InvalidResponseError('Upload response did not contain an image URL')
