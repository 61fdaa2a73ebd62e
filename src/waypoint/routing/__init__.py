"""Routing — route records and the registration table.

Routes are registered during setup. Matching and dispatch belong to the
host framework; waypoint only names routes and builds URLs from them.
"""
