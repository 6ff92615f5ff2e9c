"""
Configure base logger for sqview (see sqview.log for details).

"""
import sqview.log


# sqview version
__version__ = "0.3.0"
