from regcodec.parsing.report.decode import decode_report, decode_report_value, first_message

__all__ = ["decode_report", "decode_report_value", "first_message"]
