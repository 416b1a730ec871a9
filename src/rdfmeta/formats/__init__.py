"""Serialization format support. RDF is the only family handled by rdfmeta."""
