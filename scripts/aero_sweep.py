#!/usr/bin/env python3
"""
Drag and axial multiplier sweeps for an airframe.

Prints (or plots) the pressure, friction and total drag coefficients
over a Mach sweep for the same airframe with a regular and a perfect
finish, and the axial drag multiplier over 0..180 degrees angle of
attack.

Usage:
    uv run python scripts/aero_sweep.py --rocket estes_alpha
    uv run python scripts/aero_sweep.py --airframe my_rocket.yaml --plot --save sweep.png
"""

import argparse
import copy
import sys
import os
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from airframe import RocketAirframe, Configuration, ExternalComponent, Finish
from aerodynamics import BarrowmanCalculator, FlightConditions, axial_drag_multiplier

# Speed of sound used to turn Mach into velocity (m/s)
SPEED_OF_SOUND = 340.0


def load_airframe(args) -> RocketAirframe:
    if args.airframe:
        return RocketAirframe.load(args.airframe)
    factories = {
        "estes_alpha": RocketAirframe.estes_alpha,
        "min_diameter": RocketAirframe.high_power_minimum_diameter,
    }
    return factories[args.rocket]()


def with_finish(airframe: RocketAirframe, perfect: bool) -> RocketAirframe:
    """Copy of the airframe with regular paint everywhere and the given finish mode"""
    variant = copy.deepcopy(airframe)
    for comp in variant.iter_components():
        if isinstance(comp, ExternalComponent):
            comp.finish = Finish.NORMAL
    variant.set_perfect_finish(perfect)
    return variant


def mach_sweep(airframe: RocketAirframe, machs: np.ndarray) -> dict:
    """Aggregate drag terms per Mach number for regular and perfect finish"""
    results = {}
    for label, perfect in (("regular", False), ("perfect", True)):
        config = Configuration(with_finish(airframe, perfect))
        calc = BarrowmanCalculator(config)
        rows = []
        for mach in machs:
            conditions = FlightConditions.for_configuration(
                config, mach=mach, velocity=max(mach, 0.01) * SPEED_OF_SOUND
            )
            total = calc.get_force_analysis(conditions)[config.rocket]
            rows.append((total.pressure_cd, total.friction_cd, total.cd))
        results[label] = np.array(rows)
    return results


def print_tables(machs, drag, angles, multipliers):
    print(f"{'Mach':>6} {'Pn':>8} {'Pp':>8} {'Fn':>8} {'Fp':>8} {'CDn':>8} {'CDp':>8}")
    for i, mach in enumerate(machs):
        n = drag["regular"][i]
        p = drag["perfect"][i]
        print(f"{mach:6.2f} {n[0]:8.4f} {p[0]:8.4f} {n[1]:8.4f} {p[1]:8.4f} "
              f"{n[2]:8.4f} {p[2]:8.4f}")

    print()
    print(f"{'AOA':>6} {'mul':>8}")
    for angle, mul in zip(angles, multipliers):
        print(f"{angle:6.0f} {mul:8.4f}")


def plot_sweeps(machs, drag, angles, multipliers):
    fig, (ax_drag, ax_axial) = plt.subplots(1, 2, figsize=(12, 5))

    for label, style in (("regular", "-"), ("perfect", "--")):
        data = drag[label]
        ax_drag.plot(machs, data[:, 2], style, color="C0", label=f"CD ({label})")
        ax_drag.plot(machs, data[:, 1], style, color="C1", label=f"Friction ({label})")
        ax_drag.plot(machs, data[:, 0], style, color="C2", label=f"Pressure ({label})")
    ax_drag.set_xlabel("Mach")
    ax_drag.set_ylabel("Drag coefficient")
    ax_drag.grid(True, alpha=0.3)
    ax_drag.legend()

    ax_axial.plot(angles, multipliers, color="C3")
    ax_axial.axvline(17, color="gray", linestyle=":", alpha=0.6)
    ax_axial.set_xlabel("Angle of attack (deg)")
    ax_axial.set_ylabel("Axial drag multiplier")
    ax_axial.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig


def main():
    parser = argparse.ArgumentParser(
        description="Sweep drag over Mach and the axial multiplier over angle of attack"
    )
    parser.add_argument(
        "--rocket",
        type=str,
        default="estes_alpha",
        choices=["estes_alpha", "min_diameter"],
        help="Built-in airframe (default: estes_alpha)",
    )
    parser.add_argument(
        "--airframe",
        type=str,
        default=None,
        help="Airframe YAML file (overrides --rocket)",
    )
    parser.add_argument(
        "--max-mach",
        type=float,
        default=3.0,
        help="Upper end of the Mach sweep (default: 3.0)",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Plot the sweeps instead of printing tables",
    )
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Save the plot to this file",
    )
    args = parser.parse_args()

    airframe = load_airframe(args)
    print(airframe.summary())
    print()

    machs = np.arange(0.0, args.max_mach, 0.1)
    drag = mach_sweep(airframe, machs)

    angles = np.arange(0, 181)
    multipliers = [axial_drag_multiplier(np.radians(a)) for a in angles]

    if not args.plot:
        print_tables(machs, drag, angles, multipliers)
        return

    fig = plot_sweeps(machs, drag, angles, multipliers)
    if args.save:
        save_path = Path(args.save)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=200, bbox_inches="tight")
        print(f"Saved to {save_path}")
    else:
        plt.show()
    plt.close(fig)


if __name__ == "__main__":
    main()
