# config.py

"""Configuration settings for OpenStack Flavor Mapper."""

# Disk sizing
OS_OVERHEAD_IN_GB = 3  # Root disk space reserved for the operating system
NO_DISK = 0  # Flavor has no dedicated ephemeral disk
MB_PER_GB = 1024.0

# Logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
