"""HR Console package.

Feature modules (expiry, changelog, dashboard) derive display-ready views from
the external HR REST API, with a thin Flask controller layer on top of
service/repository layers.
"""
