"""Shamba CLI: ward recommendations and AEZ classification."""

import argparse
import json
import logging
import sys

from shamba.config import settings
from shamba.observability.tracing import init_tracing


def main() -> None:
    """Recommend for a ward: shamba <ward> [--subcounty S] [--county C] [--json]"""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="shamba",
        description="Crop, livestock and pasture recommendations for a Kenyan ward.",
    )
    parser.add_argument("ward", nargs="+", help="Ward name")
    parser.add_argument("--subcounty", default=None)
    parser.add_argument("--county", default=None)
    parser.add_argument("--data-dir", default=settings.data_dir, help="Directory holding the catalog CSVs")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    args = parser.parse_args()

    init_tracing(settings)

    from shamba.ingestion.catalog import CatalogError, load_catalog
    from shamba.pipeline.recommend import recommend_for_location, report_to_dict
    from shamba.retrieval.locations import find_location

    try:
        catalog = load_catalog(args.data_dir)
    except CatalogError as e:
        print(f"Could not load catalog: {e}")
        sys.exit(1)

    ward = " ".join(args.ward)
    location = find_location(catalog.climate, ward, args.subcounty, args.county)
    if location is None:
        print(f"Ward not found: {ward}")
        sys.exit(1)

    report = recommend_for_location(location, catalog, settings)

    if args.json:
        print(json.dumps(report_to_dict(report), indent=2, default=str))
        return
    _print_report(report)


def _print_report(report) -> None:
    from shamba.pipeline.aez import describe_zone
    from shamba.pipeline.grouping import (
        group_crops_by_type_and_name,
        group_livestock_by_type,
        group_pasture_by_type,
    )
    from shamba.pipeline.ranker import suitability_label

    loc = report.location
    band = describe_zone(report.zone)

    print("\nShamba Recommendations")
    print(f"{'=' * 50}")
    print(f"Ward:         {loc.ward}")
    print(f"Subcounty:    {loc.subcounty}")
    print(f"County:       {loc.county}")
    print(f"Coordinates:  {loc.lat}, {loc.lon}")
    print(f"Climate:      {loc.annual_temp:g}°C, {loc.annual_rain:g}mm, {loc.altitude:g}m, pH {loc.soil_ph:g}")
    print(f"AEZ:          {report.zone}" + (f" ({band.name})" if band else ""))
    print()

    print(f"{'─' * 50}")
    print(f"CROPS ({len(report.crops)} of {report.crops_ranked} suitable varieties)")
    if report.used_fallback:
        print(f"  No variety reached {settings.suitability_threshold}%, showing the best available.")
    for crop_type, by_crop in group_crops_by_type_and_name(report.crops).items():
        print(f"\n  {crop_type}:")
        for crop_name, varieties in by_crop.items():
            print(f"    {crop_name}")
            for rec in varieties:
                label = suitability_label(rec.suitability_score)
                print(f"      - {rec.crop.variety}: {rec.suitability_score}% ({label})")
                for warning in rec.warnings:
                    print(f"          ! {warning}")
    print()

    print(f"{'─' * 50}")
    print(f"LIVESTOCK ({len(report.livestock)} breeds suited to {report.zone})")
    for livestock, recs in group_livestock_by_type(report.livestock).items():
        print(f"  {livestock}: {', '.join(r.livestock.breed for r in recs)}")
    print()

    print(f"{'─' * 50}")
    print(f"PASTURE & FODDER ({len(report.pasture)} varieties suited to {report.zone})")
    for category, recs in group_pasture_by_type(report.pasture).items():
        print(f"  {category}: {', '.join(f'{r.pasture.pasture_type} ({r.pasture.variety})' for r in recs)}")
    print()


def aez_main() -> None:
    """Classify a point: shamba-aez <altitude_m> <rainfall_mm>"""
    from shamba.pipeline.aez import describe_zone, determine_aez

    if len(sys.argv) != 3:
        print("Usage: shamba-aez <altitude_m> <rainfall_mm>")
        print("  Example: shamba-aez 2000 1300")
        sys.exit(1)

    try:
        altitude, rainfall = float(sys.argv[1]), float(sys.argv[2])
    except ValueError:
        print("Altitude and rainfall must be numbers.")
        sys.exit(1)

    zone = determine_aez(altitude, rainfall)
    band = describe_zone(zone)
    print(f"{zone} ({band.name})" if band else zone)


if __name__ == "__main__":
    main()
