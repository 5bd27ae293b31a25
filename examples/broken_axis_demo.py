import click
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import plotextra as pex


def broken_axis_demo_case(
    high_cut,
    high_cut_fraction,
    num_points=200,
    file_name="broken_axis_demo.png",
    seed=0,
):
    """
    This example scatters heavy tailed data on a broken y axis, colouring
    points above the cut with a separate overflow color map.
    """
    rng = np.random.default_rng(seed)
    x = np.linspace(0.0, 1.0, num_points)
    y = rng.pareto(a=1.5, size=num_points) * high_cut / 4
    y_min = 0.0
    y_max = max(float(np.ceil(y.max())), high_cut + 1.0)

    base, overflow = pex.get_lab_colormaps(
        vmin=y_min, high_cut=high_cut, vmax=y_max, alpha=0.9
    )
    colormap = pex.BrokenColorMap(base, overflow)
    colormap.set_high_cut(high_cut)

    fig, ax = pex.create_broken_axis_figure(
        scale=pex.BrokenScale(high_cut=high_cut, high_cut_fraction=high_cut_fraction),
        ticks=pex.BrokenTicks(high_cut=high_cut),
        vmin=y_min,
        vmax=y_max,
    )
    pex.scatter_with_colormap(ax, x, y, y, colormap, s=8)
    ax.axhline(high_cut, color="k", linestyle="--", linewidth=0.5)
    ax.set_xlabel("Sample position")
    ax.set_ylabel("Value")
    fig.savefig(file_name, bbox_inches="tight")
    plt.close(fig)
    return y_max


if __name__ == "__main__":

    @click.command()
    @click.option("--high_cut", default=10.0, help="Value at which the axis breaks.")
    @click.option(
        "--high_cut_fraction",
        default=0.8,
        help="Fraction of the axis given to values below the cut.",
    )
    @click.option("--num_points", default=200, help="Number of scattered points.")
    @click.option(
        "--file_name", default="broken_axis_demo.png", help="Output image file."
    )
    def run_broken_axis_demo(high_cut, high_cut_fraction, num_points, file_name):
        click.echo(f"High cut: {high_cut}")
        click.echo(f"High cut fraction: {high_cut_fraction}")
        click.echo(f"Number of points: {num_points}")

        y_max = broken_axis_demo_case(
            high_cut=high_cut,
            high_cut_fraction=high_cut_fraction,
            num_points=num_points,
            file_name=file_name,
        )
        click.echo(f"Axis maximum: {y_max:.0f}")
        click.echo(f"Saved {file_name}")

    run_broken_axis_demo()
