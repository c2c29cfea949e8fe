import os
import numpy as np
import matplotlib
import matplotlib.pyplot as plt


def render_grid(grid, threshold, path=None, ax=None, show_costs=False, title=None):
    """
    Render an obstruction grid under 'threshold'.

    Layers:
      - background (white), walls (dark gray)
      - optional cost heat map of the last search (visited cells only)
      - path (lime line), source (green star), goal (red star)
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, W / 5), max(3, H / 5)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    if show_costs:
        costs = grid.cost_map()
        seen = np.isfinite(costs)
        if seen.any():
            norm = costs[seen] / max(1.0, float(costs[seen].max()))
            rgb[seen] = matplotlib.colormaps["viridis"](norm)[:, :3] * 0.5 + 0.5
    rgb[grid.blocked_mask(threshold)] = 0.2

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if path:
        xs, ys = zip(*path)
        ax.plot(xs, ys, color="lime", lw=2, alpha=0.8)

    sx, sy = grid.position(grid.source)
    gx, gy = grid.position(grid.target)
    ax.plot(sx, sy, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.plot(gx, gy, marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)

    if title:
        ax.set_title(title, fontsize=10)
    return ax


def save_frame(grid, threshold, path, out_path, title=None, show_costs=False):
    H, W = grid.shape
    fig, ax = plt.subplots(figsize=(max(3, W / 5), max(3, H / 5)), dpi=120)
    render_grid(grid, threshold, path=path, ax=ax, show_costs=show_costs, title=title)
    fig.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    fig.savefig(out_path, bbox_inches="tight")
    plt.close(fig)
    return out_path
