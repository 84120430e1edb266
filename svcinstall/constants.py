"""Constants shared across svcinstall."""

# Home directory (config file, log file)
SVCINSTALL_HOME_EXT = ".svcinstall"
SVCINSTALL_HOME_DISPLAY = "~/.svcinstall"

# Canonical install locations
SYSTEMD_DIR = "/etc/systemd/system"
RSYSLOG_DIR = "/etc/rsyslog.d"
LOGROTATE_DIR = "/etc/logrotate.d"

SERVICE_SUFFIX = ".service"

# Mode for every generated file
CONFIG_FILE_MODE = 0o644

# rsyslog omfile creation modes
RSYSLOG_DIR_CREATE_MODE = "0755"
RSYSLOG_FILE_CREATE_MODE = "0640"

# logrotate schedule
LOGROTATE_CADENCE = "weekly"
LOGROTATE_KEEP = 8
LOGROTATE_SIZE = "100M"
LOGROTATE_CREATE_MODE = "0640"
LOGROTATE_POSTROTATE = "systemctl kill -s HUP rsyslog.service"

# Account provisioning
NOLOGIN_SHELL = "/usr/sbin/nologin"
