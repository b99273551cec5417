"""Universal resolver core: DID Document model."""
