"""Influencer comparison services: loading, selection, records and tooltips."""
