"""
This file defines the SupabaseService class, which is a concrete implementation
of the BaseDatabaseService interface for interacting with a Supabase database.

It provides the insert and select operations the website needs, leveraging
the official Supabase Python client library. The client is created on first
use from the Supabase URL and service role key in the settings, so a missing
configuration surfaces as a failed operation rather than an import error.
"""

from brhygiene.services.base_database_service import BaseDatabaseService
from supabase import Client, ClientOptions, create_client
from typing import Dict, Any, Union, List, Optional
import logging

logger = logging.getLogger(__name__)


class SupabaseException(Exception):
    pass


class SupabaseService(BaseDatabaseService):
    """
    An implementation of BaseDatabaseService for interacting with a Supabase database.
    """

    backend_name = "supabase"

    def __init__(self, settings):
        """
        Keeps the Supabase URL, service role key and request timeout from
        the given settings. The client itself is created lazily.
        """
        self.base_url = settings.SUPABASE_URL
        self.api_key = settings.SUPABASE_SERVICE_ROLE_KEY
        self.timeout = settings.STORE_TIMEOUT_SECONDS
        self._client: Optional[Client] = None

    @property
    def supabase_client(self) -> Client:
        if self._client is None:
            if not self.base_url or not self.api_key:
                raise SupabaseException("Supabase configuration missing (SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY)")
            self._client = create_client(
                self.base_url,
                self.api_key,
                options=ClientOptions(postgrest_client_timeout=self.timeout),
            )
        return self._client

    def insert_data(
        self, table_name: str, data: Dict, **kwargs
    ) -> Dict[str, Any]:
        """
        Inserts a new record into the specified Supabase table.

        Args:
            table_name (str): The name of the Supabase table to insert into.
            data (Dict): A dictionary containing the column names and their values for the new record.
            **kwargs: Additional keyword arguments (currently not used in this implementation).

        Returns:
            Dict[str, Any]: The response from the Supabase insert operation.

        Raises:
            SupabaseException: If an error occurs during the Supabase insert operation.
        """
        try:
            logger.info(f"Inserting into table {table_name}")
            response = (
                self.supabase_client.table(table_name)
                .insert(data)
                .execute()
                .model_dump()
            )
            return response
        except Exception as e:
            logger.error(
                f"Failed to insert data into table {table_name} with error: {str(e)}"
            )
            raise SupabaseException(
                f"An error occured while inserting into table: {table_name}"
            ) from e

    def select_data(self, table_name, **kwargs) -> Union[List[Any], str]:
        """
        Fetches records from the specified Supabase table based on the provided criteria.

        Args:
            table_name (str): The name of the Supabase table to select from.
            **kwargs: Additional keyword arguments.
                - 'query' (Optional[str]): The columns to select (defaults to '*').
                - 'cols' (Dict): A dictionary of column names and values to filter the selection using exact matching.
                - 'order_by' (Optional[str]): Column to sort ascending by.

        Returns:
            List[Any]: The rows returned by the Supabase select operation.

        Raises:
            SupabaseException: If an error occurs during the Supabase select operation.
        """

        try:
            logger.info(f"Fetching data from table {table_name}")
            query = kwargs.get("query", "*")
            cols = kwargs.get("cols", None)
            order_by = kwargs.get("order_by", None)
            request = self.supabase_client.table(table_name).select(query)
            if cols:
                request = request.match(cols)
            if order_by:
                request = request.order(order_by)
            response = request.execute().model_dump()
            return response.get("data", [])
        except Exception as e:
            logger.error(f"Failed to fetch data from {table_name} with error: {str(e)}")
            raise SupabaseException(
                f"An error occured while fetching data from table: {table_name}"
            ) from e
