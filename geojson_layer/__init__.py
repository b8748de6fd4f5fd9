"""GeoJSON layer core.

Ingests GeoJSON documents (Feature or FeatureCollection) from memory,
files, packaged resources or the network, and translates their geometry
into styled drawable primitives: markers, polylines and polygons with
holes. Malformed features are skipped; only a document that is not
GeoJSON at all is reported as an error.
"""

__version__ = "0.1.0"
