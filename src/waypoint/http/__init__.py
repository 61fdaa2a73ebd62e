"""HTTP primitives: headers, request, origin detection, redirects."""
