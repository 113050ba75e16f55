"""Record sources for CSV, JSON and XML files."""
from .base import DataSource, FileInfo, detect_file_type, load_source, parse_cell
from .csv_reader import CsvReader, read_csv_raw
from .json_reader import GenericJsonReader, JsonReader, read_json_raw
from .xml_reader import XmlReader, read_xml_raw
from .factory import create_source

__all__ = ["DataSource", "FileInfo", "detect_file_type", "load_source", "parse_cell",
           "CsvReader", "read_csv_raw", "GenericJsonReader", "JsonReader", "read_json_raw",
           "XmlReader", "read_xml_raw", "create_source"]
