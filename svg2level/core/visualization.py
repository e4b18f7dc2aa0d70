import sys
import matplotlib.pyplot as plt


def plot_segments(segments, title="Level Preview", output=None):
    """
    Draws exported segments for a quick visual check of the level geometry.

    segments are (x0, y0, x1, y1, name) records as produced by
    LevelExporter.segments(). SVG is Y-down, so the axis is flipped.
    """
    print(f"[Vis] Rendering {len(segments)} segments...", file=sys.stderr)

    fig, ax = plt.subplots(figsize=(10, 10))

    # Inserting None creates breaks in the line plot, much faster than plotting individually
    xs, ys = [], []
    for x0, y0, x1, y1, _ in segments:
        xs.extend([x0, x1, None])
        ys.extend([y0, y1, None])
    if xs:
        ax.plot(xs, ys, color='#ff0044', linewidth=1.0)
        ends_x = [s[0] for s in segments] + [s[2] for s in segments]
        ends_y = [s[1] for s in segments] + [s[3] for s in segments]
        ax.scatter(ends_x, ends_y, s=6, c='black', zorder=5)

    ax.set_aspect('equal')
    ax.invert_yaxis()
    ax.grid(True, linestyle=':', alpha=0.3)
    ax.set_title(f"{title}: {len(segments)} segments")
    plt.tight_layout()

    if output:
        fig.savefig(output)
        plt.close(fig)
        print(f"[Vis] Saved preview to {output}", file=sys.stderr)
    else:
        plt.show()
