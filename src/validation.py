"""Graph validation for family tree data."""

from collections import Counter

import networkx as nx

from graph import build_graph, parents
from store import PersonStore


def validate_graph(store: PersonStore) -> list[str]:
    """
    Validate the family tree for:
    - Cycles in parent-child relationships
    - Relations recorded on only one endpoint
    - Relations pointing at removed persons
    - Self relations
    - Persons with more than two parents

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    # Create a subgraph with only PARENT_OF edges for cycle detection
    G = build_graph(store)
    parent_edges = [
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == "PARENT_OF"
    ]
    parent_graph = nx.DiGraph(parent_edges)

    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for person in store:
        counts = Counter(person.rels)
        for rel, count in counts.items():
            other_id = rel.other(person.id)

            if other_id == person.id:
                warnings.append(f"Self relation: {person.name} ({rel.kind.value})")
                continue

            if not store.is_active(other_id):
                warnings.append(
                    f"Stale: {person.name} has a {rel.kind.value} relation to "
                    f"removed person {other_id}"
                )
                continue

            # The other endpoint must hold at least as many copies
            other = store.get(other_id)
            if other.rels.count(rel) < count:
                warnings.append(
                    f"Asymmetric: {rel.kind.value} relation {rel.from_id} -> {rel.to_id} "
                    f"is recorded on {person.name} but not on {other.name}"
                )

        n_parents = len(set(parents(store, person.id)))
        if n_parents > 2:
            warnings.append(f"Suspicious: {person.name} has {n_parents} parents")

    return warnings
