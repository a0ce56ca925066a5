"""
This file defines the SupabaseService class, which is a concrete implementation
of the BaseDatabaseService interface for interacting with a Supabase database.

It provides methods for selecting, counting, inserting, conditionally updating
and deleting rows through the official Supabase Python client library. The
client is created on first use from the Supabase URL and service role key in
the application settings.
"""

from typing import Any, Dict, List, Optional
import logging

from supabase import Client, create_client

from contactdesk.core.config import settings
from contactdesk.services.base_database_service import BaseDatabaseService

logger = logging.getLogger(__name__)


class SupabaseException(Exception):
    pass


class SupabaseService(BaseDatabaseService):
    """
    An implementation of BaseDatabaseService for interacting with a Supabase database.
    """

    def __init__(self):
        self.base_url = settings.SUPABASE_URL
        self.api_key = settings.SUPABASE_SERVICE_ROLE_KEY
        self._client: Optional[Client] = None

    @property
    def supabase_client(self) -> Client:
        if self._client is None:
            if not self.base_url or not self.api_key:
                logger.error("Supabase configuration missing")
                raise SupabaseException("Supabase is not configured")
            self._client = create_client(self.base_url, self.api_key)
        return self._client

    @staticmethod
    def _apply_filters(query, cols: Optional[Dict] = None, text_search: Optional[Dict] = None):
        if cols:
            # PostgREST expects lowercase boolean literals
            query = query.match(
                {
                    key: str(value).lower() if isinstance(value, bool) else value
                    for key, value in cols.items()
                }
            )
        if text_search:
            # websearch_to_tsquery match on the generated tsvector column
            query = query.filter(
                text_search["column"], "wfts(english)", text_search["query"]
            )
        return query

    def select_data(self, table_name: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Selects rows from the specified Supabase table.

        Args:
            table_name (str): The name of the Supabase table to select from.
            **kwargs: Optional keyword arguments:
                      query - the PostgREST select expression (default ``*``),
                      cols - dictionary of column equality filters,
                      text_search - ``{"column": ..., "query": ...}`` full-text filter,
                      order_by - column to sort by, desc - sort descending,
                      offset / limit - pagination window.

        Returns:
            List[Dict[str, Any]]: The matching rows.

        Raises:
            SupabaseException: If an error occurs during the Supabase select operation.
        """
        try:
            query = self.supabase_client.table(table_name).select(kwargs.get("query", "*"))
            query = self._apply_filters(query, kwargs.get("cols"), kwargs.get("text_search"))

            order_by = kwargs.get("order_by")
            if order_by:
                query = query.order(order_by, desc=kwargs.get("desc", False))

            limit = kwargs.get("limit")
            if limit is not None:
                offset = kwargs.get("offset", 0)
                query = query.range(offset, offset + limit - 1)

            response = query.execute().model_dump()
            return response.get("data") or []
        except SupabaseException:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch data from {table_name} with error: {str(e)}")
            raise SupabaseException(
                f"An error occured while fetching data from table: {table_name}"
            )

    def count_data(self, table_name: str, **kwargs) -> int:
        """
        Counts rows in the specified Supabase table without fetching them.

        Args:
            table_name (str): The name of the Supabase table.
            **kwargs: ``cols`` and ``text_search`` filters, as for ``select_data``.

        Returns:
            int: The exact number of matching rows.

        Raises:
            SupabaseException: If an error occurs during the Supabase count operation.
        """
        try:
            query = self.supabase_client.table(table_name).select("id", count="exact").limit(1)
            query = self._apply_filters(query, kwargs.get("cols"), kwargs.get("text_search"))
            response = query.execute().model_dump()
            return response.get("count") or 0
        except SupabaseException:
            raise
        except Exception as e:
            logger.error(f"Failed to count rows in {table_name} with error: {str(e)}")
            raise SupabaseException(
                f"An error occured while counting rows in table: {table_name}"
            )

    def insert_data(self, table_name: str, data: Dict, **kwargs) -> List[Dict[str, Any]]:
        """
        Inserts a new record into the specified Supabase table.

        Args:
            table_name (str): The name of the Supabase table to insert into.
            data (Dict): Column names and values for the new record.

        Returns:
            List[Dict[str, Any]]: The inserted rows as returned by the store.

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
            return response.get("data") or []
        except SupabaseException:
            raise
        except Exception as e:
            logger.error(
                f"Failed to insert data into table {table_name} with error: {str(e)}"
            )
            raise SupabaseException(
                f"An error occured while inserting into table: {table_name}"
            )

    def update_data(self, table_name: str, data: Dict, **kwargs) -> List[Dict[str, Any]]:
        """
        Updates records in the specified Supabase table that match the given criteria.

        The update is a single statement, so a ``null_cols`` guard makes it a
        conditional write: rows whose guarded columns are already set are left
        untouched.

        Args:
            table_name (str): The name of the Supabase table to update.
            data (Dict): A dictionary containing the column names and their new values.
            **kwargs: Must include 'cols', the dictionary of column equality filters.
                      May include 'null_cols', columns that must still be null.

        Returns:
            List[Dict[str, Any]]: The rows that were updated.

        Raises:
            SupabaseException: If an error occurs during the Supabase update operation.
        """
        try:
            logger.info(f"Updating table {table_name} with data: {data}")
            query = self.supabase_client.table(table_name).update(data).match(kwargs["cols"])
            for column in kwargs.get("null_cols") or []:
                query = query.is_(column, "null")
            response = query.execute().model_dump()
            return response.get("data") or []
        except SupabaseException:
            raise
        except Exception as e:
            logger.error(f"Failed to update table {table_name} with error: {str(e)}")
            raise SupabaseException(
                f"An error occured while updating table: {table_name}"
            )

    def delete_data(self, table_name: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Deletes records from the specified Supabase table that match the given criteria.

        Args:
            table_name (str): The name of the Supabase table to delete from.
            **kwargs: Must include 'cols', the dictionary of column equality filters.

        Returns:
            List[Dict[str, Any]]: The deleted rows.

        Raises:
            SupabaseException: If an error occurs during the Supabase delete operation.
        """
        try:
            logger.info(f"Deleting data from table {table_name}")
            response = (
                self.supabase_client.table(table_name)
                .delete()
                .match(kwargs["cols"])
                .execute()
                .model_dump()
            )
            return response.get("data") or []
        except SupabaseException:
            raise
        except Exception as e:
            logger.error(
                f"Failed to delete data from {table_name} with error: {str(e)}"
            )
            raise SupabaseException(
                f"An error occured while deleting from table: {table_name}"
            )


supabase_service = SupabaseService()
