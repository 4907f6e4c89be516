"""
1) Build a small family tree in memory.
2) Validate it for cycles, stale and one-sided relations.
3) Lay it out on a grid around a start person.
4) Plot the layout.
"""

from pathlib import Path

from graph import relate
from layout import compute_layout
from logconfig import configure_logging
from models import Person, RelType, Sex
from plotting import plot_layout
from settings import FamgridSettings
from store import PersonStore
from validation import validate_graph


def build_demo_store(settings: FamgridSettings) -> PersonStore:
    """Two parents, married, with three children."""
    store = PersonStore(capacity=settings.capacity)

    rene = store.add(Person(name="Rene", sex=Sex.M))
    katharina = store.add(Person(name="Katharina", sex=Sex.F))
    samuel = store.add(Person(name="Samuel", sex=Sex.M))
    val = store.add(Person(name="Val", sex=Sex.F))
    annika = store.add(Person(name="Annika", sex=Sex.F))

    relate(store, rene, katharina, RelType.MARRIED)
    for parent in (rene, katharina):
        for child in (samuel, val, annika):
            relate(store, parent, child, RelType.PARENT)

    return store


def main():
    settings = FamgridSettings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    print("Building family tree...")
    store = build_demo_store(settings)
    print(f"  Store has {len(store)} persons")

    print("Validating graph...")
    warnings = validate_graph(store)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    print(f"Laying out from person {settings.start} ({settings.max_hops} hops)...")
    layers = compute_layout(store, settings.start, settings.max_hops)
    for layer in layers:
        name = store.get(layer.person_id).name
        print(f"  {name:<12} row {layer.row:>3}  col {layer.col:>3}")

    output_path = Path(settings.output_path) if settings.output_path else None
    print(f"Plotting layout to: {output_path or 'screen'}")
    plot_layout(store, layers, settings, output_path)

    print("Done!")


if __name__ == "__main__":
    main()
