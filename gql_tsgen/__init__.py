"""TypeScript type declarations from GraphQL schemas."""

__version__ = "0.1.0"
