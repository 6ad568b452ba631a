"""Firestore client factory following Dependency Inversion Principle."""
import logging
from typing import Optional

from google.cloud import firestore


class FirestoreClientFactory:
    """Factory for creating Firestore clients."""

    @staticmethod
    def create_client(project_id: Optional[str]) -> firestore.Client:
        """
        Create a Firestore client bound to a project.

        Credentials come from the environment (Application Default
        Credentials). The client is safe to share between threads.

        Args:
            project_id: Google Cloud project ID

        Returns:
            Firestore client

        Raises:
            ValueError: If no project ID is configured
        """
        if not project_id:
            raise ValueError("GCP_PROJECT not configured")

        logging.info(f"Creating Firestore client - projectID: {project_id}")
        return firestore.Client(project=project_id)
