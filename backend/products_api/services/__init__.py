"""Service layer.

Import concrete services from their subpackages
(:mod:`products_api.services.auth`, :mod:`products_api.services.products`);
this package stays import-light so repositories can depend on
:mod:`products_api.services._shared.errors` without cycles.
"""
