"""Application layer – export orchestration and pagination primitives."""
