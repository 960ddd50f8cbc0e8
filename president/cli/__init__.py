"""Command-line front-ends for President."""
