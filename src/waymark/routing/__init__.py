"""Routing — ordered route table with direct and segment-walk matching.

Routes are registered during setup and matched per request; each match
returns its own ``RouteMatch`` value.
"""
