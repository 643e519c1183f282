from fourcolor.algorithm.common import *
