#!/usr/bin/env python3

'''
    Unit of size used for side axes

    frequently used: inch, centimeters, points (pt)
        - An inch is 2.54 cm.
        - For TeX, 1 pt is 1/72.27 in, which is 0.351459804 mm.
        - For most other softwares, 1 pt is 1/72 in, which is 0.352777778 mm.
          Also called Postscript Point, in TeX this is called a big point (bp)

    Besides lengths, some units depend on the figure:
        - normalized: fraction of figure width/height
        - pixels: 1/dpi inches
        - characters: width and height of a character in default font
'''

import matplotlib.pyplot as plt

# Unit to inch
Units=dict(
    inches=1.,      # 2.54 cm
    pt_tex=1/72.27, # For TeX, 1 pt is 1/72.27 inches
    points=1/72,    # In typography, a point is 1/72 inches.
                    #    In TeX this is called a big point (bp)
    centimeters=1/2.54,
    )
Units['millimeters']=0.1*Units['centimeters']

## some alias
Units['cm']=Units['centimeters']
Units['mm']=Units['millimeters']
Units['pts']=Units['points']
Units['inch']=Units['inches']

# character box, in unit of fontsize
CHAR_WIDTH=0.5
CHAR_HEIGHT=1.2    # default linespacing of `matplotlib.text.Text`

# all units accepted for position
UNITS=['normalized', 'inches', 'centimeters', 'points', 'pixels', 'characters',
       'millimeters', 'pt_tex']

# function

## convert between units
def convert_unit(src, dest='inch'):
    '''
        convert src unit to another ('inch' by default)

        only for units of length in `Units`
    '''
    d=Units[src]
    if dest[:4]!='inch':
        d=d/Units[dest]

    return d

def unit_in_inches(unit, fig=None):
    '''
        size of a unit in inches along x and y

        Parameters:
            unit: str
                length unit in `Units`, or 'pixels', 'characters', 'normalized'

            fig: `plt.Figure` or None
                figure which units depend on
                needed for 'normalized' and 'pixels'

        return (ux, uy)
    '''
    if unit in Units:
        u=Units[unit]
        return u, u

    if unit=='characters':
        fontsize=plt.rcParams['font.size']*Units['points']
        return CHAR_WIDTH*fontsize, CHAR_HEIGHT*fontsize

    assert fig is not None, \
        'figure required for unit \'%s\'' % unit

    if unit=='pixels':
        u=1/fig.dpi
        return u, u

    if unit=='normalized':
        w, h=fig.get_size_inches()
        return w, h

    raise ValueError('unexpected unit: \'%s\'' % unit)
