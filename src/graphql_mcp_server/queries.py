"""GraphQL documents sent by the MCP server."""

# Two levels of ofType are requested; field type names resolve one level deep.
INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    types {
      name
      kind
      description
      fields {
        name
        description
        type {
          name
          kind
          ofType {
            name
            kind
          }
        }
      }
    }
  }
}
"""
