"""Core constants: status codes of the result envelope and shared literals."""

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NOT_FOUND = 404
HTTP_CONFLICT = 409
HTTP_INTERNAL_SERVER_ERROR = 500

# Default ordering for every listing
DEFAULT_SORT_FIELD = "createdAt"

# Projections used by listings and uniqueness checks
ROLE_UNIQUENESS_FIELDS = ["_id", "name"]
PERMISSION_LIST_FIELDS = ["_id", "roleId", "moduleId", "createdAt"]

# Relation aliases
ROLE_PERMISSIONS_ALIAS = "permissions"
