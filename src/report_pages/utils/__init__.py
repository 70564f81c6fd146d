"""
This package provides the utilities shared by the report pages modules.

The modules within this package handle specific concerns such as:
- `constants`: Storage format tokens, the label separator and page defaults.
- `data_utils`: YAML loading, storage format validation and input descriptions.
- `naming`: Filename and script-identifier sanitizing, and composed data labels.
"""
