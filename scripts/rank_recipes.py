#!/usr/bin/env python3
"""
Rank recipes by how much of each one a pantry already covers.
Reads a pantry JSON (category -> ingredient names) and a recipe JSON,
matches every ingredient line and writes the ranking to CSV.
"""

import argparse
import datetime
import logging

from tqdm import tqdm

from pantry_utils.ingredients import IngredientMatcher, MatchingConfig, Vocabulary
from pantry_utils.recipes import (
    analyze_recipes,
    compatibility_dataframe,
    filter_recipes,
    load_pantry,
    load_recipes,
    match_dataframe,
)


def main():
    """Main function to rank recipes against a pantry."""
    parser = argparse.ArgumentParser(
        description="Rank recipes by pantry compatibility"
    )
    parser.add_argument(
        "--pantry",
        type=str,
        required=True,
        help="Path to the pantry JSON file (category -> ingredient list)",
    )
    parser.add_argument(
        "--recipes",
        type=str,
        required=True,
        help="Path to the recipes JSON file",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON file overriding matching confidence settings",
    )
    parser.add_argument(
        "--vocabulary",
        type=str,
        default=None,
        help="Optional vocabulary JSON replacing the bundled word lists and synonyms",
    )
    parser.add_argument(
        "--min-compatibility",
        type=int,
        default=0,
        help="Only report recipes with at least this compatibility score",
    )
    parser.add_argument(
        "--max-missing",
        type=int,
        default=None,
        help="Only report recipes missing at most this many ingredients",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output CSV file (defaults to a timestamped name)",
    )
    parser.add_argument(
        "--matches-output",
        type=str,
        default=None,
        help="Optional CSV file for per-ingredient match details",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the matching library",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )

    config = MatchingConfig.from_json(args.config) if args.config else None
    vocabulary = Vocabulary.from_json(args.vocabulary) if args.vocabulary else None

    pantry = load_pantry(args.pantry)
    recipes = load_recipes(args.recipes)
    matcher = IngredientMatcher(pantry, vocabulary=vocabulary, config=config)
    print(
        f"Loaded {matcher.pantry_size} pantry items in {len(pantry)} categories "
        f"and {len(recipes)} recipes"
    )

    if not recipes:
        print("No recipes found. Exiting.")
        return

    results = analyze_recipes(
        matcher, tqdm(recipes.items(), total=len(recipes), desc="Matching recipes")
    )
    results = filter_recipes(
        results, min_compatibility=args.min_compatibility, max_missing=args.max_missing
    )

    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = args.output or f"recipe_compatibility_{timestamp}.csv"
    compatibility_dataframe(results).to_csv(output_file, index=False)
    if args.matches_output:
        match_dataframe(results).to_csv(args.matches_output, index=False)

    print("Successfully ranked recipes:")
    print(f"  - File: {output_file}")
    print(f"  - Recipes reported: {len(results)}")
    if results:
        best = results[0]
        print(f"  - Best match: {best.recipe_id} ({best.compatibility_score}%)")


if __name__ == "__main__":
    main()
