# Centralized collection names to prevent drift.

COL_SMS_LOGS = "msm_logs"
