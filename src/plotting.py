"""Visualization of computed layouts."""

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.patches import FancyBboxPatch

from models import Layer, RelType, Sex
from settings import CellConfig, DisplayConfig, FamgridSettings
from store import PersonStore

SEX_COLORS = {
    Sex.M: "lightblue",
    Sex.F: "lightpink",
    Sex.U: "lightgray",
}


def cell_rect(
    layer: Layer, cell: CellConfig, display: DisplayConfig
) -> tuple[float, float, float, float]:
    """Screen rectangle (x, y, width, height) of a placed person."""
    x = (layer.col * (cell.width + cell.pad) + cell.pad) * display.zoom
    y = (layer.row * (cell.height + cell.pad) + cell.pad) * display.zoom
    return (
        x + display.offset_x,
        y + display.offset_y,
        cell.width * display.zoom,
        cell.height * display.zoom,
    )


def plot_layout(
    store: PersonStore,
    layers: list[Layer],
    settings: FamgridSettings,
    output_path: Path | None = None,
):
    """
    Draw every placement as a box labelled with the person's name.

    Boxes are colored by sex. Relations between two placed persons are drawn
    as lines between box centers: solid for parent/child, dashed for
    marriages.

    Args:
        store: Persons referenced by the layers
        layers: Output of `layout.compute_layout`
        settings: Cell size and display transform
        output_path: Path to save the output image (PNG). If None, displays interactively.
    """
    rects = {layer.person_id: cell_rect(layer, settings.cell, settings.display) for layer in layers}

    fig, ax = plt.subplots(figsize=(12, 9))

    # Edges first so boxes are drawn over them
    for person_id, (x, y, w, h) in rects.items():
        for rel in store.get(person_id).rels:
            # Each relation is stored twice; draw it from its from_id side only
            if rel.from_id != person_id or rel.to_id not in rects:
                continue
            ox, oy, ow, oh = rects[rel.to_id]
            ax.plot(
                [x + w / 2, ox + ow / 2],
                [y + h / 2, oy + oh / 2],
                color="darkgray",
                linestyle="--" if rel.kind is RelType.MARRIED else "-",
                linewidth=1,
                zorder=1,
            )

    for layer in layers:
        person = store.get(layer.person_id)
        x, y, w, h = rects[layer.person_id]
        ax.add_patch(
            FancyBboxPatch(
                (x, y),
                w,
                h,
                boxstyle="round,pad=0,rounding_size=8",
                facecolor=SEX_COLORS[person.sex],
                edgecolor="gray",
                zorder=2,
            )
        )
        ax.text(x + w / 2, y + h / 2, person.name, ha="center", va="center", fontsize=10, zorder=3)

    if rects:
        xs = [x for x, _, _, _ in rects.values()] + [x + w for x, _, w, _ in rects.values()]
        ys = [y for _, y, _, _ in rects.values()] + [y + h for _, y, _, h in rects.values()]
        pad = settings.cell.pad * settings.display.zoom
        ax.set_xlim(min(xs) - pad, max(xs) + pad)
        # Higher rows are drawn higher up
        ax.set_ylim(min(ys) - pad, max(ys) + pad)

    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Family Tree Layout ({len(layers)} people)")
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        print(f"Layout saved to {output_path}")
    else:
        plt.show()
