"""Service layer — engine operations returning OperationResult for the CLI."""
