"""Bridge layer between elasticlean and the Elasticsearch cluster.

Modules
-------
transport
    ``CatalogTransport`` protocol and the httpx-backed ``ElasticTransport``.
"""
