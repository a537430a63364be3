# -*- coding: utf-8 -*-

from samplers.cli import console_main

if __name__ == '__main__':
    console_main()
