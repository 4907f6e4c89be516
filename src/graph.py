"""Relationship graph operations on a PersonStore."""

import logging

import networkx as nx

from models import Layer, LayerKnowledge, Relation, RelType
from store import PersonStore

logger = logging.getLogger("famgrid.graph")


def relate(store: PersonStore, from_id: int, to_id: int, kind: RelType) -> Relation:
    """
    Record a relation on both of its endpoints.

    For PARENT relations `from_id` is the parent and `to_id` the child;
    the order is taken as given.
    """
    source = store.get(from_id)
    target = store.get(to_id)

    rel = Relation(kind=kind, from_id=from_id, to_id=to_id)
    source.rels.append(rel)
    target.rels.append(rel)
    logger.debug("related %d -> %d (%s)", from_id, to_id, kind.value)
    return rel


def detach(store: PersonStore, person_id: int) -> list[Relation]:
    """
    Drop every relation touching `person_id` from both of its endpoints.

    Returns the dropped relations. Endpoints that are no longer active are
    skipped, so this also clears stale entries.
    """
    person = store.get(person_id)
    dropped = list(dict.fromkeys(person.rels))

    for rel in dropped:
        other_id = rel.other(person_id)
        if other_id != person_id and store.is_active(other_id):
            other = store.get(other_id)
            other.rels[:] = [r for r in other.rels if r != rel]
    person.rels.clear()

    logger.debug("detached %d relations from %d", len(dropped), person_id)
    return dropped


def neighbour_layers(layer: Layer, rels: list[Relation]) -> list[Layer]:
    """
    Candidate placements for everyone related to the person at `layer`.

    Spouses go one column to the right on the same row with both
    coordinates fixed. Children go one row down and parents one row up,
    keeping the column as a hint to be resolved against the row's
    occupants.
    """
    layers: list[Layer] = []
    for rel in rels:
        if rel.kind is RelType.PARENT:
            if rel.from_id == layer.person_id:
                row, other = layer.row - 1, rel.to_id
            else:
                row, other = layer.row + 1, rel.from_id
            layers.append(Layer(row, layer.col, other, LayerKnowledge.KNOWN_ROW))
        else:
            layers.append(
                Layer(
                    layer.row,
                    layer.col + 1,
                    rel.other(layer.person_id),
                    LayerKnowledge.KNOWN_BOTH,
                )
            )
    return layers


def spouses(store: PersonStore, person_id: int) -> list[int]:
    return [
        r.other(person_id)
        for r in store.get(person_id).rels
        if r.kind is RelType.MARRIED
    ]


def parents(store: PersonStore, person_id: int) -> list[int]:
    return [
        r.from_id
        for r in store.get(person_id).rels
        if r.kind is RelType.PARENT and r.to_id == person_id
    ]


def children(store: PersonStore, person_id: int) -> list[int]:
    return [
        r.to_id
        for r in store.get(person_id).rels
        if r.kind is RelType.PARENT and r.from_id == person_id
    ]


def build_graph(store: PersonStore) -> nx.DiGraph:
    """
    Build a NetworkX directed graph from the store.

    Each relation becomes one edge: PARENT_OF from parent to child, SPOUSE_OF
    from `from_id` to `to_id`. Relations whose endpoints are not both active
    are left out.
    """
    G = nx.DiGraph()

    for person in store:
        G.add_node(person.id, person_name=person.name, sex=person.sex.value)

    for person in store:
        for rel in person.rels:
            if rel.from_id != person.id:
                continue
            if not store.is_active(rel.to_id):
                continue
            rel_type = "PARENT_OF" if rel.kind is RelType.PARENT else "SPOUSE_OF"
            G.add_edge(rel.from_id, rel.to_id, relationship_type=rel_type)

    return G
