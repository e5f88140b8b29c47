"""
Resource stores.

A store caches the list of one backend resource and mediates list, create,
update and delete calls. Mutations are confirm-then-apply: the cached list is
only patched from the server's answer, never before it and never on failure.
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .exceptions import ClientException, ValidationError
from .notifications import notify_success
from .pagination import Pagination
from .storage import PersistedStorage, get_storage
from .utils import normalize_id, same_id, unwrap
from .validation import validate_form

logger = logging.getLogger(__name__)


class ResourceStore:
    """
    Base class for resource stores.

    Subclasses bind the request hooks (``list_request``, ``detail_request``,
    ``create_request``, ``update_request``, ``delete_request``) to service
    functions and tune the class attributes below.
    """

    # Display names used in toasts
    label = 'Item'
    plural_label = 'items'

    # Key of the list inside the ``data`` payload; None when ``data`` is the list
    list_key: Optional[str] = None

    # Server identifier, aliased to ``id`` when alias_ids is set
    id_field = '_id'
    alias_ids = True

    # 'append' or 'prepend' for created items
    insert_position = 'append'

    # Merge update responses into the cached item instead of replacing it
    merge_updates = False

    # Storage key for list snapshots; None keeps the store in memory only
    persist_key: Optional[str] = None

    # DRF serializer validating create/update payloads before they are sent
    serializer_class = None

    # Emit success toasts for mutations
    notify_on_success = True

    # Re-raise failures after they were notified
    raise_errors = False

    def __init__(self, storage: Optional[PersistedStorage] = None, raise_errors=None):
        self.items: List[Dict[str, Any]] = []
        self.pagination = Pagination()
        self.selected: Optional[Dict[str, Any]] = None
        self.is_loading = False
        self.storage = storage or get_storage()
        if raise_errors is not None:
            self.raise_errors = raise_errors

    # =========================================================================
    # Request hooks
    # =========================================================================

    def list_request(self, params):
        raise NotImplementedError

    def detail_request(self, item_id):
        raise NotImplementedError

    def create_request(self, data):
        raise NotImplementedError

    def update_request(self, item_id, data):
        raise NotImplementedError

    def delete_request(self, item_id):
        raise NotImplementedError

    # =========================================================================
    # Normalization
    # =========================================================================

    def normalize(self, item):
        """Map a server record to its cached form."""
        if self.alias_ids:
            return normalize_id(item, self.id_field)
        return item

    def item_id(self, item):
        if not isinstance(item, dict):
            return None
        if self.alias_ids and item.get('id') is not None:
            return item['id']
        return item.get(self.id_field)

    def extract_items(self, payload):
        """Return the records of a list payload."""
        if self.list_key is None:
            records = payload
        elif isinstance(payload, dict):
            records = payload.get(self.list_key)
        else:
            records = None
        return records if isinstance(records, list) else []

    # =========================================================================
    # Queries on cached state
    # =========================================================================

    def get_by_id(self, item_id):
        for item in self.items:
            if same_id(self.item_id(item), item_id):
                return item
        return None

    def filter_by(self, **fields):
        return [
            item for item in self.items
            if all(item.get(key) == value for key, value in fields.items())
        ]

    # =========================================================================
    # Actions
    # =========================================================================

    @contextmanager
    def loading(self):
        self.is_loading = True
        try:
            yield
        finally:
            self.is_loading = False

    def fetch(self, params=None, append=False, raise_errors=None):
        """
        Load one page of the resource.
        Replaces the cached list (or appends to it) and the pagination metadata.
        Returns the cached list, or None on failure.
        """
        params = dict(params or {})
        with self.loading():
            try:
                body = self.list_request(params)
            except ClientException as e:
                return self._fail('fetch', e, raise_errors)

        payload = unwrap(body)
        records = [self.normalize(record) for record in self.extract_items(payload)]
        self.items = self.items + records if append else records
        self.pagination = Pagination.from_payload(payload, len(records), params)
        self.after_fetch(payload)
        self.persist()
        return self.items

    def after_fetch(self, payload):
        """Hook for stores that read extra fields from a list payload."""

    def fetch_all(self, params=None, limit=200, raise_errors=None):
        """Walk every page of the resource and cache the combined list."""
        params = dict(params or {})
        collected = []
        page = 1
        with self.loading():
            while True:
                try:
                    body = self.list_request({**params, 'page': page, 'limit': limit})
                except ClientException as e:
                    return self._fail('fetch_all', e, raise_errors)
                payload = unwrap(body)
                collected.extend(self.normalize(r) for r in self.extract_items(payload))
                pages = Pagination.from_payload(payload, len(collected), {'limit': limit}).pages
                page += 1
                if page > max(pages, 1):
                    break

        self.items = collected
        self.pagination = Pagination(total=len(collected), page=1, limit=limit, pages=page - 1)
        self.persist()
        return self.items

    def fetch_by_id(self, item_id, prefer_cache=False, raise_errors=None):
        """Load one record into ``selected``; cached records win when prefer_cache is set."""
        if prefer_cache:
            cached = self.get_by_id(item_id)
            if cached is not None:
                self.selected = cached
                return cached

        with self.loading():
            try:
                body = self.detail_request(item_id)
            except ClientException as e:
                return self._fail('fetch_by_id', e, raise_errors)

        payload = unwrap(body)
        if not isinstance(payload, dict):
            return None
        item = self.normalize(payload)
        self.selected = item
        if prefer_cache:
            self._upsert(item)
        return item

    def create(self, data, raise_errors=None):
        """
        Create a record; the server representation is added to the list.
        Returns the created item, True when the server confirmed without a
        record, or None on failure.
        """
        try:
            self.validate(data)
        except ValidationError as e:
            return self._fail('create', e, raise_errors)

        with self.loading():
            try:
                body = self.create_request(data)
            except ClientException as e:
                return self._fail('create', e, raise_errors)

        payload = unwrap(body)
        self._success(f'{self.label} created successfully')
        if not isinstance(payload, dict):
            return True
        item = self.normalize(payload)
        self._upsert(item, position=self.insert_position)
        self.persist()
        return item

    def update(self, item_id, data, raise_errors=None):
        """Update a record; only the matching cached item changes."""
        try:
            self.validate(data, partial=True)
        except ValidationError as e:
            return self._fail('update', e, raise_errors)

        with self.loading():
            try:
                body = self.update_request(item_id, data)
            except ClientException as e:
                return self._fail('update', e, raise_errors)

        item = self.apply_update(item_id, unwrap(body), data)
        self._success(f'{self.label} updated successfully')
        return item

    def apply_update(self, item_id, payload, sent=None):
        """
        Patch the cached item with a confirmed update.
        Responses without a record fall back to the fields that were sent.
        """
        existing = self.get_by_id(item_id)
        if isinstance(payload, dict):
            if self.merge_updates and existing is not None:
                payload = {**existing, **payload}
            incoming = self.normalize(payload)
        elif existing is not None:
            incoming = {**existing, **(sent or {})}
        else:
            return None

        self.items = [
            incoming if same_id(self.item_id(item), item_id) else item
            for item in self.items
        ]
        if self.selected is not None and same_id(self.item_id(self.selected), item_id):
            self.selected = {**self.selected, **incoming}
        self.persist()
        return incoming

    def delete(self, item_id, raise_errors=None):
        """Delete a record; returns True once the server confirmed it."""
        with self.loading():
            try:
                self.delete_request(item_id)
            except ClientException as e:
                self._fail('delete', e, raise_errors)
                return False

        self._remove([item_id])
        self._success(f'{self.label} deleted successfully')
        return True

    def bulk_delete(self, ids):
        """
        Delete several records one by one.
        Each failure is notified on its own; only confirmed ids leave the list.
        """
        deleted = []
        with self.loading():
            for item_id in ids:
                try:
                    self.delete_request(item_id)
                except ClientException as e:
                    logger.info(f"Bulk delete of {self.label} {item_id} failed: {e.message}")
                    continue
                deleted.append(item_id)

        if deleted:
            self._remove(deleted)
            self._success(f'{len(deleted)} {self.plural_label} deleted successfully')
        return deleted

    def toggle_status(self, item_id, field='isActive'):
        """Flip a boolean flag of a cached record through update()."""
        item = self.get_by_id(item_id)
        if item is None:
            return None
        return self.update(item_id, {field: not item.get(field)})

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, data, partial=False):
        """Run the store serializer; invalid data blocks the request."""
        if self.serializer_class is not None:
            validate_form(self.serializer_class, data, partial=partial)
        return data

    # =========================================================================
    # Persistence
    # =========================================================================

    def persist(self):
        if not self.persist_key:
            return
        self.storage.set_item(self.persist_key, {
            'items': self.items,
            'pagination': self.pagination.to_dict(),
        })

    def hydrate(self):
        """Restore the last persisted snapshot; returns True if one existed."""
        if not self.persist_key:
            return False
        snapshot = self.storage.get_item(self.persist_key)
        if not snapshot:
            return False
        self.items = list(snapshot.get('items', []))
        self.pagination = Pagination(**snapshot.get('pagination', {}))
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _upsert(self, item, position='append'):
        item_id = self.item_id(item)
        if self.get_by_id(item_id) is not None:
            self.items = [
                item if same_id(self.item_id(existing), item_id) else existing
                for existing in self.items
            ]
        elif position == 'prepend':
            self.items = [item] + self.items
        else:
            self.items = self.items + [item]

    def _remove(self, ids):
        self.items = [
            item for item in self.items
            if not any(same_id(self.item_id(item), item_id) for item_id in ids)
        ]
        if self.selected is not None and any(
            same_id(self.item_id(self.selected), item_id) for item_id in ids
        ):
            self.selected = None
        self.persist()

    def _success(self, message):
        if self.notify_on_success:
            notify_success(message)

    def _fail(self, action, error, raise_errors=None):
        logger.info(f"{type(self).__name__}.{action} failed: {error.message}")
        should_raise = self.raise_errors if raise_errors is None else raise_errors
        if should_raise:
            raise error
        return None
