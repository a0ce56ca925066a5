from typing import Any, Dict, List, Optional


class BaseDatabaseService:
    """
    Base class for database service implementations.

    This class defines the interface for the document store operations the
    inbox relies on: filtered and paginated selects, counts, inserts,
    conditional updates and deletes. Concrete database service
    implementations inherit from this class and override each method.
    """

    def select_data(self, table_name: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Selects records from the specified table based on provided criteria.

        Args:
            table_name (str): The name of the table to select from.
            **kwargs: Selection criteria such as ``cols`` (equality filters),
                      ``order_by``, ``offset``, ``limit`` and ``text_search``.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.select_data not implemented")

    def count_data(self, table_name: str, **kwargs) -> int:
        """
        Counts the records in the specified table that match the criteria.

        Args:
            table_name (str): The name of the table to count.
            **kwargs: The same filtering keyword arguments as ``select_data``.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.count_data not implemented")

    def insert_data(self, table_name: str, data: Any, **kwargs) -> List[Dict[str, Any]]:
        """
        Inserts a new record into the specified table.

        Args:
            table_name (str): The name of the table to insert into.
            data (Any): The data for the new record.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.insert_data not implemented")

    def update_data(self, table_name: str, data: Optional[Any], **kwargs) -> List[Dict[str, Any]]:
        """
        Updates the records that match ``cols`` (and, when given, whose
        ``null_cols`` are still null).

        Args:
            table_name (str): The name of the table to update.
            data (Optional[Any]): The data to update the record with.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.update_data not implemented")

    def delete_data(self, table_name: str, **kwargs) -> List[Dict[str, Any]]:
        """
        Deletes one or more records from the specified table.

        Args:
            table_name (str): The name of the table to delete from.
            **kwargs: Must include ``cols`` with the equality filter.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.delete_data not implemented")
