KILOBYTE = 1024
MEGABYTE = 1024 * KILOBYTE
GIGABYTE = 1024 * MEGABYTE
TERABYTE = 1024 * GIGABYTE

# Bounds on the run parameters
MIN_FILECOUNT = 50
MAX_FILECOUNT = 5000
MIN_FILESIZE = 1
MAX_FILESIZE = 10 * MEGABYTE
MIN_WRITESIZE = 128
MAX_WRITESIZE = 64 * KILOBYTE

# Defaults
DEFAULT_ITERATIONS = 1
DEFAULT_FILESIZE = "4K"
DEFAULT_WRITESIZE = "4K"
DEFAULT_FILECOUNT = 2000
DEFAULT_TEST_NAME = "PerfFilesPerFolder"

# File name format is '<prefix>_FilesPerFolder_<index>_<random>.txt'
TEST_FILE_NAME = "_FilesPerFolder_"
TEST_FILE_EXT = ".txt"

HTTP_TIMEOUT_S = 30.0
# In-memory limit for an HTTP upload before it spills to a temporary file
HTTP_SPOOL_MAX = 1024 * 1024
