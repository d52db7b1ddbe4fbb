"""
Journey runner script.

Usage:
    python scripts/run_journey.py configs/default_journey.yaml
    python scripts/run_journey.py configs/default_journey.yaml --velocity 0.99 --duration 5

This script:
1. Loads configuration from YAML file
2. Computes the relativistic effects of the journey
3. Runs the dual clocks in real time with a progress bar
4. Generates plots and a summary report
"""

import sys
import argparse
from pathlib import Path

# Add src to path so we can import the lightspeed package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from lightspeed.config import JourneyParameters, group_messages, setup_logging
from lightspeed.errors import DomainError
from lightspeed.journey import journey_effects, resolve_destination
from lightspeed import constants as const
from lightspeed.clock import ClockSimulator, run_clock
from lightspeed.diagnostics import check_clock_health, check_velocity_precision
from lightspeed.formatting import format_distance, format_observer_clock, format_traveler_clock, format_rate
from lightspeed.visualization import (
    plot_lorentz_factor_curve,
    plot_travel_times,
    plot_clock_history,
    generate_summary_report
)


def main():
    parser = argparse.ArgumentParser(
        description='Run a relativistic journey with live dual clocks'
    )
    parser.add_argument(
        'config',
        type=str,
        help='Path to YAML configuration file'
    )
    parser.add_argument(
        '--velocity',
        type=float,
        default=None,
        help='Override velocity (fraction of c)'
    )
    parser.add_argument(
        '--destination',
        type=str,
        default=None,
        help='Override destination (e.g. SIRIUS or "Andromeda Galaxy")'
    )
    parser.add_argument(
        '--duration',
        type=float,
        default=None,
        help='Override clock run duration (seconds)'
    )
    parser.add_argument(
        '--skip-plots',
        action='store_true',
        help='Skip plot generation'
    )

    args = parser.parse_args()

    # Load configuration
    print(f"Loading configuration from {args.config}...")
    try:
        params = JourneyParameters.from_yaml(args.config)
        if args.velocity is not None:
            params.velocity_fraction = args.velocity
        if args.destination is not None:
            params.destination = resolve_destination(args.destination)
            params.distance_light_years = const.ASTRONOMICAL_DISTANCES[params.destination]
        if args.duration is not None:
            params.duration = args.duration
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    setup_logging(params.log_level)

    grouped = group_messages(params.validate())
    for message in grouped['ERROR'] + grouped['WARNING']:
        print(f"  {message}")
    if grouped['ERROR']:
        sys.exit(1)

    v = params.clamped_velocity_fraction

    # Journey summary
    print("=" * 70)
    print(f"JOURNEY: {params.journey_name}")
    print("=" * 70)
    print(f"Destination: {params.destination_label} ({params.distance_light_years:g} light years)")
    print(f"At {v * 100:.10f}% light speed")

    snapshot = None
    try:
        snapshot = journey_effects(params.distance_light_years, v)
    except DomainError as e:
        print(f"[WARN] {e}")

    if snapshot is not None:
        print(f"  ({snapshot.speed_miles_per_s:.2f} miles/sec, {snapshot.speed_km_per_s:.2f} km/s)")
        print(f"Distance contracted to: {format_distance(snapshot.contracted_distance)}")
        print(f"Time dilation factor: {snapshot.time_dilation_factor:.2f}x")
        print(f"Coordinate time: {snapshot.coordinate_time_formatted.formatted}")
        print(f"Proper time: {snapshot.proper_time_formatted.formatted}")

    for warning in check_velocity_precision(v)['warnings']:
        print(f"  {warning}")
    print("=" * 70)
    print()

    # Run clocks
    simulator = ClockSimulator()
    simulator.set_velocity_fraction(v)

    print(f"Running clocks for {params.duration:g} s ({params.n_ticks} ticks)...")
    history = run_clock(
        simulator,
        params.duration,
        tick_interval=params.tick_interval,
        show_progress=params.show_progress
    )

    final = simulator.snapshot()
    health = check_clock_health(simulator)

    print()
    print("=" * 70)
    print("CLOCKS")
    print("=" * 70)
    print(f"Spacecraft time: {format_traveler_clock(final.traveler_elapsed)}")
    print(f"Earth time: {format_observer_clock(final.observer_elapsed)}")
    print(f"Current rate: {format_rate(final.instantaneous_ratio)}")
    print(f"Average ratio: {format_rate(final.average_ratio)}")
    for warning in health['warnings']:
        print(f"  {warning}")
    print("=" * 70)
    print()

    if not args.skip_plots:
        print("Generating plots and report...")
        output_dir = Path(params.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)

        plot_files = {
            'lorentz_factor': output_dir / 'lorentz_factor.png',
            'travel_times': output_dir / 'travel_times.png',
            'clock_history': output_dir / 'clock_history.png',
        }

        try:
            plot_lorentz_factor_curve(str(plot_files['lorentz_factor']))
            print(f"  [OK] {plot_files['lorentz_factor'].name}")
        except Exception as e:
            print(f"  [ERROR] lorentz_factor: {e}")

        try:
            plot_travel_times(params.distance_light_years, str(plot_files['travel_times']),
                              destination_label=params.destination_label)
            print(f"  [OK] {plot_files['travel_times'].name}")
        except Exception as e:
            print(f"  [ERROR] travel_times: {e}")

        try:
            plot_clock_history(history, str(plot_files['clock_history']))
            print(f"  [OK] {plot_files['clock_history'].name}")
        except Exception as e:
            print(f"  [ERROR] clock_history: {e}")

        if snapshot is not None:
            report_path = output_dir / 'summary_report.txt'
            generate_summary_report(params, snapshot, str(report_path), history=history)
            print(f"  [OK] {report_path.name}")

    print("Done.")


if __name__ == "__main__":
    main()
