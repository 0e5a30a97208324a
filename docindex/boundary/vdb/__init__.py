"""
Vector database boundary layer.

Provides similarity index implementations behind one interface:
- S3VectorsIndex: Production S3 Vectors client (boto3)
- FaissIndex: Local FAISS index (LangChain)
- InMemoryIndex: In-process cosine index

Dependencies: boto3, langchain_community, numpy
System role: Vector store adapter for document indexing
"""

from docindex.boundary.vdb.base import SimilarityIndex
from docindex.boundary.vdb.in_memory_index import InMemoryIndex
from docindex.boundary.vdb.vector_schemas import IndexMatch
from docindex.boundary.vdb.vector_store_factory import get_vector_store

__all__ = [
    "IndexMatch",
    "InMemoryIndex",
    "SimilarityIndex",
    "get_vector_store",
]
