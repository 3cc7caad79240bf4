# Plain-text report templates (rendered line by line onto the output sink)

BANNER_TXT = """***********************
**** Customer owes ****
***********************"""

DETAILS_TXT = """name: {{ customer }}
amount: {{ amount }}
due: {{ due }}"""
