"""Application tests for the in-memory product store."""

import re
from dataclasses import replace

from stockroom.store.memory_adapter import InMemoryProductStore


class TestInMemoryProductStore:
    def test_save_mints_object_id_shaped_ids(self, store, hobbit):
        stored = store.save(hobbit)
        assert re.fullmatch(r"[0-9a-f]{24}", stored.id)

    def test_save_with_id_replaces(self, store, hobbit):
        stored = store.save(hobbit)
        store.save(replace(stored, quantity=1))
        assert store.find_by_id(stored.id).quantity == 1
        assert len(store) == 1

    def test_save_with_unknown_id_inserts(self, store, hobbit):
        store.save(hobbit.with_id("explicit"))
        assert store.find_by_id("explicit") == hobbit.with_id("explicit")

    def test_find_all_keeps_insertion_order(self, store, hobbit):
        ids = [store.save(hobbit).id for _ in range(3)]
        assert [product.id for product in store.find_all()] == ids

    def test_delete_unknown_id_is_a_no_op(self, store, hobbit):
        store.save(hobbit)
        store.delete_by_id("missing")
        assert len(store) == 1

    def test_delete_removes_record(self, store, hobbit):
        stored = store.save(hobbit)
        store.delete_by_id(stored.id)
        assert store.find_by_id(stored.id) is None

    def test_clear(self, store, hobbit):
        store.save(hobbit)
        store.clear()
        assert store.find_all() == []

    def test_separate_instances_do_not_share_records(self, hobbit):
        first, second = InMemoryProductStore(), InMemoryProductStore()
        first.save(hobbit)
        assert second.find_all() == []
