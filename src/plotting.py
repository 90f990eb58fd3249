"""Visualization of age category counts."""

from pathlib import Path

import matplotlib.pyplot as plt

from models import AgeCategory


CATEGORY_COLORS = {
    AgeCategory.BABY: "lightpink",
    AgeCategory.CHILD: "lightsalmon",
    AgeCategory.TEEN: "khaki",
    AgeCategory.ADULT: "lightblue",
    AgeCategory.SENIOR: "plum",
    AgeCategory.UNKNOWN: "lightgray",
}


def plot_age_categories(counts: dict[AgeCategory, int], output_path: Path | None = None):
    """
    Draw one bar per age category.

    Args:
        counts: records per category; missing categories are drawn as zero
        output_path: Path to save the output image (PNG). If None, displays interactively.
    """
    categories = list(AgeCategory)
    values = [counts.get(category, 0) for category in categories]

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(
        [category.value for category in categories],
        values,
        color=[CATEGORY_COLORS[category] for category in categories],
        edgecolor="gray",
    )
    ax.set_xlabel("Age category")
    ax.set_ylabel("People")
    ax.set_title(f"Age categories ({sum(values)} people)")
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        print(f"Plot saved to {output_path}")
    else:
        plt.show()
    plt.close(fig)
