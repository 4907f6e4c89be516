"""Tests for family tree validation warnings."""

from conftest import ANNIKA, KATHARINA, RENE, VAL
from graph import detach, relate
from models import Person, RelType
from store import PersonStore
from validation import validate_graph


class TestValidateGraph:
    def test_clean_family(self, family: PersonStore) -> None:
        assert validate_graph(family) == []

    def test_empty_store(self, store: PersonStore) -> None:
        assert validate_graph(store) == []

    def test_parent_cycle(self, store: PersonStore) -> None:
        a = store.add(Person(name="a"))
        b = store.add(Person(name="b"))
        relate(store, a, b, RelType.PARENT)
        relate(store, b, a, RelType.PARENT)
        warnings = validate_graph(store)
        assert any(w.startswith("Cycle detected") for w in warnings)

    def test_stale_relation(self, family: PersonStore) -> None:
        family.remove(ANNIKA)
        warnings = validate_graph(family)
        stale = [w for w in warnings if w.startswith("Stale")]
        assert len(stale) == 2
        assert "Stale: Rene has a PARENT relation to removed person 4" in stale

    def test_detach_before_remove_is_clean(self, family: PersonStore) -> None:
        detach(family, ANNIKA)
        family.remove(ANNIKA)
        assert validate_graph(family) == []

    def test_recycled_slot_is_asymmetric(self, family: PersonStore) -> None:
        family.remove(KATHARINA)
        newcomer = family.add(Person(name="Newcomer"))
        assert newcomer == KATHARINA
        warnings = validate_graph(family)
        asym = [w for w in warnings if w.startswith("Asymmetric")]
        assert len(asym) == 4
        assert any("recorded on Rene but not on Newcomer" in w for w in asym)

    def test_one_sided_relation(self, family: PersonStore) -> None:
        family.get(VAL).rels.clear()
        warnings = validate_graph(family)
        assert len([w for w in warnings if w.startswith("Asymmetric")]) == 2

    def test_self_relation(self, store: PersonStore) -> None:
        a = store.add(Person(name="narcissus"))
        relate(store, a, a, RelType.MARRIED)
        assert validate_graph(store) == ["Self relation: narcissus (MARRIED)"]

    def test_too_many_parents(self, family: PersonStore) -> None:
        extra = family.add(Person(name="Extra"))
        relate(family, extra, VAL, RelType.PARENT)
        warnings = validate_graph(family)
        assert warnings == ["Suspicious: Val has 3 parents"]

    def test_reports_names(self, family: PersonStore) -> None:
        relate(family, RENE, RENE, RelType.PARENT)
        warnings = validate_graph(family)
        assert "Self relation: Rene (PARENT)" in warnings
