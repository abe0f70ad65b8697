"""
Constants and configuration values for the process taxonomy tree.
"""

# Hierarchy levels, ordered from rank 1 (top) to rank 5
HIERARCHY_LEVELS = (
    'L1 - Line of Business',
    'L2 - Process Group',
    'L3 - Scope Item',
    'L4 - Process Variant',
    'L5 - Process Step',
)

# Metadata columns copied onto nodes: column name -> (attribute, default)
METADATA_FIELDS = {
    'ID': ('record_id', ''),
    'Business Role': ('business_role', ''),
    'Fiori app UX recommendations': ('fiori_recommendations', ''),
    'Insights (Indicative)': ('insights', ''),
    'Business stakeholders': ('business_stakeholders', ''),
    'Materiality': ('materiality', 0),
    'Description': ('description', ''),
}

# Numeric metadata columns (everything else is text)
NUMERIC_METADATA_FIELDS = ('Materiality',)

# Keys of the persisted node record
NODE_ID_KEY = '_id'
NODE_TITLE_KEY = 'title'
NODE_PARENT_KEY = '_parent'
NODE_CHILDREN_KEY = '_child'

# Spreadsheet formats understood by the tabular reader
EXCEL_EXTENSIONS = ('.xlsx', '.xlsm', '.xls')
CSV_EXTENSIONS = ('.csv',)

# Command line defaults
DEFAULT_INPUT_FILE = 'digitalmapsresults_scopeitem_metawarsss4i1_s4hana_onprem_1909.xlsx'
DEFAULT_OUTPUT_FILE = 'tree_output.json'

# Reporting defaults
DEFAULT_REPORT_TOP_N = 5
DEFAULT_REPORT_MAX_EXAMPLES = 3
