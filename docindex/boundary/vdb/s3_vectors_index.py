"""
S3 Vectors similarity index.

Production index backed by Amazon S3 Vectors through the boto3 "s3vectors"
client. The document text is kept in vector metadata under "text", which the
index definition should declare as a non-filterable metadata key.

Dependencies: boto3, botocore, docindex.core.exceptions
System role: Production vector store (S3 Vectors)
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from docindex.boundary.vdb.base import SimilarityIndex
from docindex.boundary.vdb.vector_schemas import IndexMatch
from docindex.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


def _request_id(response: dict[str, Any]) -> str | None:
    return response.get("ResponseMetadata", {}).get("RequestId")


class S3VectorsIndex(SimilarityIndex):
    """
    S3 Vectors client for vector operations.

    Upserts are idempotent by key: put_vectors overwrites a vector with the
    same key. Queries request metadata and distance but never vector data.
    """

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str = "documents",
        region: str = "us-east-1",
        client: Any | None = None,
    ) -> None:
        """
        Initialize S3 Vectors client with configuration.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            region: AWS region for S3 Vectors
            client: Pre-built boto3 client (tests inject a stub)
        """
        self._vectors_bucket = vectors_bucket
        self._index_name = index_name
        self.client = client or boto3.client("s3vectors", region_name=region)

        logger.info(
            f"{__name__}:__init__ - S3 Vectors index ready",
            extra={"bucket": vectors_bucket, "index_name": index_name, "region": region},
        )

    def upsert(self, id: str, vector: list[float], payload: dict[str, Any]) -> str | None:
        """
        Upsert one vector with metadata into the S3 Vectors index.

        Raises:
            VectorStoreError: If upsert operation fails
        """
        try:
            response = self.client.put_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                vectors=[
                    {
                        "key": id,
                        "data": {"float32": [float(value) for value in vector]},
                        "metadata": payload,
                    }
                ],
            )
        except (ClientError, BotoCoreError) as e:
            raise VectorStoreError(
                message="Failed to upsert vector to S3 Vectors",
                operation="upsert",
                details={"error": str(e), "id": id},
            ) from e

        return _request_id(response)

    def query(self, vector: list[float], k: int) -> list[IndexMatch]:
        """
        Query vectors by similarity.

        Raises:
            VectorStoreError: If query operation fails
        """
        try:
            response = self.client.query_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                topK=k,
                queryVector={"float32": [float(value) for value in vector]},
                returnMetadata=True,
                returnDistance=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise VectorStoreError(
                message="Failed to query vectors from S3 Vectors",
                operation="query",
                details={"error": str(e), "top_k": k},
            ) from e

        cosine = response.get("distanceMetric", "cosine") == "cosine"
        matches = []
        for item in response.get("vectors", []):
            distance = item.get("distance")
            score = None
            if distance is not None:
                score = 1.0 - distance if cosine else -distance
            matches.append(
                IndexMatch(
                    id=item["key"],
                    payload=item.get("metadata") or {},
                    score=score,
                )
            )
        return matches

    def delete_by_id(self, id: str) -> str | None:
        """
        Delete a vector by key. S3 Vectors ignores keys that do not exist.

        Raises:
            VectorStoreError: If delete operation fails
        """
        try:
            response = self.client.delete_vectors(
                vectorBucketName=self._vectors_bucket,
                indexName=self._index_name,
                keys=[id],
            )
        except (ClientError, BotoCoreError) as e:
            raise VectorStoreError(
                message="Failed to delete vector from S3 Vectors",
                operation="delete",
                details={"error": str(e), "id": id},
            ) from e

        return _request_id(response)
