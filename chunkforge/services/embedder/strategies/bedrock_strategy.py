"""Amazon Bedrock embedder."""

import json

import boto3
import botocore.exceptions

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.config.settings import get_settings
from chunkforge.exceptions import EmbeddingError
from chunkforge.services.embedder.base import BaseEmbedder


class BedrockEmbedder(BaseEmbedder):
    """
    Amazon Bedrock embeddings, e.g. amazon.titan-embed-text-v2:0. One invoke_model
    call per text. Uses IAM credentials (profile/env/instance); region from
    config.region or settings.aws_region.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        super().__init__(config)
        self._client = None

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    def _get_client(self):
        if self._client is None:
            region = self.config.region or get_settings().aws_region or None
            self._client = boto3.client("bedrock-runtime", region_name=region)
        return self._client

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        client = self._get_client()
        results: list[list[float]] = []
        for text in texts:
            try:
                response = client.invoke_model(
                    modelId=self.config.model,
                    contentType="application/json",
                    accept="application/json",
                    body=json.dumps({"inputText": text}),
                )
            except botocore.exceptions.ClientError as e:
                raise EmbeddingError(f"Bedrock invoke_model failed: {e}", cause=e) from e
            payload = json.loads(response["body"].read().decode("utf-8"))
            results.append(_extract_embedding(payload))
        return results


def _extract_embedding(payload: dict) -> list[float]:
    emb = payload.get("embedding")
    if emb is None:
        # Titan V2 can return embeddingsByType
        by_type = payload.get("embeddingsByType") or {}
        emb = by_type.get("float") or next(iter(by_type.values()), None)
    if not emb:
        raise EmbeddingError("Bedrock response contained no embedding")
    return [float(x) for x in emb]
