"""Build request attributes from a Starlette request."""

from starlette.requests import Request

from unique_session.domain.models.request_attributes import RequestAttributes


def request_attributes_from_request(request: Request) -> RequestAttributes:
    """Expose headers and the common request branches for ip_field resolution.

    Available branches: ``headers``, ``client`` (``host``, ``port``),
    ``cookies``, ``query`` and ``path_params``.
    """
    client: dict[str, object] = {}
    if request.client:
        client = {"host": request.client.host, "port": request.client.port}

    return RequestAttributes.build(
        dict(request.headers.items()),
        client=client,
        cookies=dict(request.cookies),
        query=dict(request.query_params.items()),
        path_params=dict(request.path_params),
    )
