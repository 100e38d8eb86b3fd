"""Lookup tables for dual marching cubes.

Corners of a cell are numbered by their offset: bit 0 of the x, y and z
offsets gives corner ``x + 2*y + 4*z``. A cube code sets bit ``i`` when
corner ``i`` is at or above the iso level.

Edges are single bits of a 12-bit mask:

======  =============  ======  =============
bit     corners        bit     corners
======  =============  ======  =============
1       0 - 1          64      6 - 7
2       1 - 5          128     2 - 6
4       4 - 5          256     0 - 2
8       0 - 4          512     1 - 3
16      2 - 3          1024    5 - 7
32      3 - 7          2048    4 - 6
======  =============  ======  =============

A dual point code ORs together the edges whose crossings are averaged into
one vertex of the dual mesh.
"""

from __future__ import annotations

__all__ = ["dual_points", "problematic_direction"]

_DUAL_POINTS: tuple[tuple[int, ...], ...] = (
    (),  # 0
    (1 | 8 | 256,),  # 1
    (1 | 2 | 512,),  # 2
    (2 | 8 | 256 | 512,),  # 3
    (16 | 128 | 256,),  # 4
    (1 | 8 | 16 | 128,),  # 5
    (1 | 2 | 512, 16 | 128 | 256),  # 6
    (2 | 8 | 16 | 128 | 512,),  # 7
    (16 | 32 | 512,),  # 8
    (1 | 8 | 256, 16 | 32 | 512),  # 9
    (1 | 2 | 16 | 32,),  # 10
    (2 | 8 | 16 | 32 | 256,),  # 11
    (32 | 128 | 256 | 512,),  # 12
    (1 | 8 | 32 | 128 | 512,),  # 13
    (1 | 2 | 32 | 128 | 256,),  # 14
    (2 | 8 | 32 | 128,),  # 15
    (4 | 8 | 2048,),  # 16
    (1 | 4 | 256 | 2048,),  # 17
    (1 | 2 | 512, 4 | 8 | 2048),  # 18
    (2 | 4 | 256 | 512 | 2048,),  # 19
    (16 | 128 | 256, 4 | 8 | 2048),  # 20
    (1 | 4 | 16 | 128 | 2048,),  # 21
    (1 | 2 | 512, 16 | 128 | 256, 4 | 8 | 2048),  # 22
    (2 | 4 | 16 | 128 | 512 | 2048,),  # 23
    (16 | 32 | 512, 4 | 8 | 2048),  # 24
    (1 | 4 | 256 | 2048, 16 | 32 | 512),  # 25
    (1 | 2 | 16 | 32, 4 | 8 | 2048),  # 26
    (2 | 4 | 16 | 32 | 256 | 2048,),  # 27
    (32 | 128 | 256 | 512, 4 | 8 | 2048),  # 28
    (1 | 4 | 32 | 128 | 512 | 2048,),  # 29
    (1 | 2 | 32 | 128 | 256, 4 | 8 | 2048),  # 30
    (2 | 4 | 32 | 128 | 2048,),  # 31
    (2 | 4 | 1024,),  # 32
    (1 | 8 | 256, 2 | 4 | 1024),  # 33
    (1 | 4 | 512 | 1024,),  # 34
    (4 | 8 | 256 | 512 | 1024,),  # 35
    (16 | 128 | 256, 2 | 4 | 1024),  # 36
    (1 | 8 | 16 | 128, 2 | 4 | 1024),  # 37
    (1 | 4 | 512 | 1024, 16 | 128 | 256),  # 38
    (4 | 8 | 16 | 128 | 512 | 1024,),  # 39
    (16 | 32 | 512, 2 | 4 | 1024),  # 40
    (1 | 8 | 256, 16 | 32 | 512, 2 | 4 | 1024),  # 41
    (1 | 4 | 16 | 32 | 1024,),  # 42
    (4 | 8 | 16 | 32 | 256 | 1024,),  # 43
    (32 | 128 | 256 | 512, 2 | 4 | 1024),  # 44
    (1 | 8 | 32 | 128 | 512, 2 | 4 | 1024),  # 45
    (1 | 4 | 32 | 128 | 256 | 1024,),  # 46
    (4 | 8 | 32 | 128 | 1024,),  # 47
    (2 | 8 | 1024 | 2048,),  # 48
    (1 | 2 | 256 | 1024 | 2048,),  # 49
    (1 | 8 | 512 | 1024 | 2048,),  # 50
    (256 | 512 | 1024 | 2048,),  # 51
    (16 | 128 | 256, 2 | 8 | 1024 | 2048),  # 52
    (1 | 2 | 16 | 128 | 1024 | 2048,),  # 53
    (1 | 8 | 512 | 1024 | 2048, 16 | 128 | 256),  # 54
    (16 | 128 | 512 | 1024 | 2048,),  # 55
    (16 | 32 | 512, 2 | 8 | 1024 | 2048),  # 56
    (1 | 2 | 256 | 1024 | 2048, 16 | 32 | 512),  # 57
    (1 | 8 | 16 | 32 | 1024 | 2048,),  # 58
    (16 | 32 | 256 | 1024 | 2048,),  # 59
    (32 | 128 | 256 | 512, 2 | 8 | 1024 | 2048),  # 60
    (1 | 2 | 32 | 128 | 512 | 1024 | 2048,),  # 61
    (1 | 8 | 32 | 128 | 256 | 1024 | 2048,),  # 62
    (32 | 128 | 1024 | 2048,),  # 63
    (64 | 128 | 2048,),  # 64
    (1 | 8 | 256, 64 | 128 | 2048),  # 65
    (1 | 2 | 512, 64 | 128 | 2048),  # 66
    (2 | 8 | 256 | 512, 64 | 128 | 2048),  # 67
    (16 | 64 | 256 | 2048,),  # 68
    (1 | 8 | 16 | 64 | 2048,),  # 69
    (1 | 2 | 512, 16 | 64 | 256 | 2048),  # 70
    (2 | 8 | 16 | 64 | 512 | 2048,),  # 71
    (16 | 32 | 512, 64 | 128 | 2048),  # 72
    (1 | 8 | 256, 16 | 32 | 512, 64 | 128 | 2048),  # 73
    (1 | 2 | 16 | 32, 64 | 128 | 2048),  # 74
    (2 | 8 | 16 | 32 | 256, 64 | 128 | 2048),  # 75
    (32 | 64 | 256 | 512 | 2048,),  # 76
    (1 | 8 | 32 | 64 | 512 | 2048,),  # 77
    (1 | 2 | 32 | 64 | 256 | 2048,),  # 78
    (2 | 8 | 32 | 64 | 2048,),  # 79
    (4 | 8 | 64 | 128,),  # 80
    (1 | 4 | 64 | 128 | 256,),  # 81
    (1 | 2 | 512, 4 | 8 | 64 | 128),  # 82
    (2 | 4 | 64 | 128 | 256 | 512,),  # 83
    (4 | 8 | 16 | 64 | 256,),  # 84
    (1 | 4 | 16 | 64,),  # 85
    (1 | 2 | 512, 4 | 8 | 16 | 64 | 256),  # 86
    (2 | 4 | 16 | 64 | 512,),  # 87
    (16 | 32 | 512, 4 | 8 | 64 | 128),  # 88
    (1 | 4 | 64 | 128 | 256, 16 | 32 | 512),  # 89
    (1 | 2 | 16 | 32, 4 | 8 | 64 | 128),  # 90
    (2 | 4 | 16 | 32 | 64 | 128 | 256,),  # 91
    (4 | 8 | 32 | 64 | 256 | 512,),  # 92
    (1 | 4 | 32 | 64 | 512,),  # 93
    (1 | 2 | 4 | 8 | 32 | 64 | 256,),  # 94
    (2 | 4 | 32 | 64,),  # 95
    (2 | 4 | 1024, 64 | 128 | 2048),  # 96
    (1 | 8 | 256, 2 | 4 | 1024, 64 | 128 | 2048),  # 97
    (1 | 4 | 512 | 1024, 64 | 128 | 2048),  # 98
    (4 | 8 | 256 | 512 | 1024, 64 | 128 | 2048),  # 99
    (16 | 64 | 256 | 2048, 2 | 4 | 1024),  # 100
    (1 | 8 | 16 | 64 | 2048, 2 | 4 | 1024),  # 101
    (1 | 4 | 512 | 1024, 16 | 64 | 256 | 2048),  # 102
    (4 | 8 | 16 | 64 | 512 | 1024 | 2048,),  # 103
    (16 | 32 | 512, 2 | 4 | 1024, 64 | 128 | 2048),  # 104
    (1 | 8 | 256, 16 | 32 | 512, 2 | 4 | 1024, 64 | 128 | 2048),  # 105
    (1 | 4 | 16 | 32 | 1024, 64 | 128 | 2048),  # 106
    (4 | 8 | 16 | 32 | 256 | 1024, 64 | 128 | 2048),  # 107
    (32 | 64 | 256 | 512 | 2048, 2 | 4 | 1024),  # 108
    (1 | 8 | 32 | 64 | 512 | 2048, 2 | 4 | 1024),  # 109
    (1 | 4 | 32 | 64 | 256 | 1024 | 2048,),  # 110
    (4 | 8 | 32 | 64 | 1024 | 2048,),  # 111
    (2 | 8 | 64 | 128 | 1024,),  # 112
    (1 | 2 | 64 | 128 | 256 | 1024,),  # 113
    (1 | 8 | 64 | 128 | 512 | 1024,),  # 114
    (64 | 128 | 256 | 512 | 1024,),  # 115
    (2 | 8 | 16 | 64 | 256 | 1024,),  # 116
    (1 | 2 | 16 | 64 | 1024,),  # 117
    (1 | 8 | 16 | 64 | 256 | 512 | 1024,),  # 118
    (16 | 64 | 512 | 1024,),  # 119
    (16 | 32 | 512, 2 | 8 | 64 | 128 | 1024),  # 120
    (1 | 2 | 64 | 128 | 256 | 1024, 16 | 32 | 512),  # 121
    (1 | 8 | 16 | 32 | 64 | 128 | 1024,),  # 122
    (16 | 32 | 64 | 128 | 256 | 1024,),  # 123
    (2 | 8 | 32 | 64 | 256 | 512 | 1024,),  # 124
    (1 | 2 | 32 | 64 | 512 | 1024,),  # 125
    (1 | 8 | 256, 32 | 64 | 1024),  # 126
    (32 | 64 | 1024,),  # 127
    (32 | 64 | 1024,),  # 128
    (1 | 8 | 256, 32 | 64 | 1024),  # 129
    (1 | 2 | 512, 32 | 64 | 1024),  # 130
    (2 | 8 | 256 | 512, 32 | 64 | 1024),  # 131
    (16 | 128 | 256, 32 | 64 | 1024),  # 132
    (1 | 8 | 16 | 128, 32 | 64 | 1024),  # 133
    (1 | 2 | 512, 16 | 128 | 256, 32 | 64 | 1024),  # 134
    (2 | 8 | 16 | 128 | 512, 32 | 64 | 1024),  # 135
    (16 | 64 | 512 | 1024,),  # 136
    (1 | 8 | 256, 16 | 64 | 512 | 1024),  # 137
    (1 | 2 | 16 | 64 | 1024,),  # 138
    (2 | 8 | 16 | 64 | 256 | 1024,),  # 139
    (64 | 128 | 256 | 512 | 1024,),  # 140
    (1 | 8 | 64 | 128 | 512 | 1024,),  # 141
    (1 | 2 | 64 | 128 | 256 | 1024,),  # 142
    (2 | 8 | 64 | 128 | 1024,),  # 143
    (4 | 8 | 2048, 32 | 64 | 1024),  # 144
    (1 | 4 | 256 | 2048, 32 | 64 | 1024),  # 145
    (1 | 2 | 512, 4 | 8 | 2048, 32 | 64 | 1024),  # 146
    (2 | 4 | 256 | 512 | 2048, 32 | 64 | 1024),  # 147
    (16 | 128 | 256, 4 | 8 | 2048, 32 | 64 | 1024),  # 148
    (1 | 4 | 16 | 128 | 2048, 32 | 64 | 1024),  # 149
    (1 | 2 | 512, 16 | 128 | 256, 4 | 8 | 2048, 32 | 64 | 1024),  # 150
    (2 | 4 | 16 | 128 | 512 | 2048, 32 | 64 | 1024),  # 151
    (16 | 64 | 512 | 1024, 4 | 8 | 2048),  # 152
    (1 | 4 | 256 | 2048, 16 | 64 | 512 | 1024),  # 153
    (1 | 2 | 16 | 64 | 1024, 4 | 8 | 2048),  # 154
    (2 | 4 | 16 | 64 | 256 | 1024 | 2048,),  # 155
    (64 | 128 | 256 | 512 | 1024, 4 | 8 | 2048),  # 156
    (1 | 4 | 64 | 128 | 512 | 1024 | 2048,),  # 157
    (1 | 2 | 64 | 128 | 256 | 1024, 4 | 8 | 2048),  # 158
    (2 | 4 | 64 | 128 | 1024 | 2048,),  # 159
    (2 | 4 | 32 | 64,),  # 160
    (1 | 8 | 256, 2 | 4 | 32 | 64),  # 161
    (1 | 4 | 32 | 64 | 512,),  # 162
    (4 | 8 | 32 | 64 | 256 | 512,),  # 163
    (16 | 128 | 256, 2 | 4 | 32 | 64),  # 164
    (1 | 8 | 16 | 128, 2 | 4 | 32 | 64),  # 165
    (1 | 4 | 32 | 64 | 512, 16 | 128 | 256),  # 166
    (4 | 8 | 16 | 32 | 64 | 128 | 512,),  # 167
    (2 | 4 | 16 | 64 | 512,),  # 168
    (1 | 8 | 256, 2 | 4 | 16 | 64 | 512),  # 169
    (1 | 4 | 16 | 64,),  # 170
    (4 | 8 | 16 | 64 | 256,),  # 171
    (2 | 4 | 64 | 128 | 256 | 512,),  # 172
    (1 | 2 | 4 | 8 | 64 | 128 | 512,),  # 173
    (1 | 4 | 64 | 128 | 256,),  # 174
    (4 | 8 | 64 | 128,),  # 175
    (2 | 8 | 32 | 64 | 2048,),  # 176
    (1 | 2 | 32 | 64 | 256 | 2048,),  # 177
    (1 | 8 | 32 | 64 | 512 | 2048,),  # 178
    (32 | 64 | 256 | 512 | 2048,),  # 179
    (16 | 128 | 256, 2 | 8 | 32 | 64 | 2048),  # 180
    (1 | 2 | 16 | 32 | 64 | 128 | 2048,),  # 181
    (1 | 8 | 32 | 64 | 512 | 2048, 16 | 128 | 256),  # 182
    (16 | 32 | 64 | 128 | 512 | 2048,),  # 183
    (2 | 8 | 16 | 64 | 512 | 2048,),  # 184
    (1 | 2 | 16 | 64 | 256 | 512 | 2048,),  # 185
    (1 | 8 | 16 | 64 | 2048,),  # 186
    (16 | 64 | 256 | 2048,),  # 187
    (2 | 8 | 64 | 128 | 256 | 512 | 2048,),  # 188
    (1 | 2 | 512, 64 | 128 | 2048),  # 189
    (1 | 8 | 64 | 128 | 256 | 2048,),  # 190
    (64 | 128 | 2048,),  # 191
    (32 | 128 | 1024 | 2048,),  # 192
    (1 | 8 | 256, 32 | 128 | 1024 | 2048),  # 193
    (1 | 2 | 512, 32 | 128 | 1024 | 2048),  # 194
    (2 | 8 | 256 | 512, 32 | 128 | 1024 | 2048),  # 195
    (16 | 32 | 256 | 1024 | 2048,),  # 196
    (1 | 8 | 16 | 32 | 1024 | 2048,),  # 197
    (1 | 2 | 512, 16 | 32 | 256 | 1024 | 2048),  # 198
    (2 | 8 | 16 | 32 | 512 | 1024 | 2048,),  # 199
    (16 | 128 | 512 | 1024 | 2048,),  # 200
    (1 | 8 | 256, 16 | 128 | 512 | 1024 | 2048),  # 201
    (1 | 2 | 16 | 128 | 1024 | 2048,),  # 202
    (2 | 8 | 16 | 128 | 256 | 1024 | 2048,),  # 203
    (256 | 512 | 1024 | 2048,),  # 204
    (1 | 8 | 512 | 1024 | 2048,),  # 205
    (1 | 2 | 256 | 1024 | 2048,),  # 206
    (2 | 8 | 1024 | 2048,),  # 207
    (4 | 8 | 32 | 128 | 1024,),  # 208
    (1 | 4 | 32 | 128 | 256 | 1024,),  # 209
    (1 | 2 | 512, 4 | 8 | 32 | 128 | 1024),  # 210
    (2 | 4 | 32 | 128 | 256 | 512 | 1024,),  # 211
    (4 | 8 | 16 | 32 | 256 | 1024,),  # 212
    (1 | 4 | 16 | 32 | 1024,),  # 213
    (1 | 2 | 512, 4 | 8 | 16 | 32 | 256 | 1024),  # 214
    (2 | 4 | 16 | 32 | 512 | 1024,),  # 215
    (4 | 8 | 16 | 128 | 512 | 1024,),  # 216
    (1 | 4 | 16 | 128 | 256 | 512 | 1024,),  # 217
    (1 | 2 | 4 | 8 | 16 | 128 | 1024,),  # 218
    (16 | 128 | 256, 2 | 4 | 1024),  # 219
    (4 | 8 | 256 | 512 | 1024,),  # 220
    (1 | 4 | 512 | 1024,),  # 221
    (1 | 2 | 4 | 8 | 256 | 1024,),  # 222
    (2 | 4 | 1024,),  # 223
    (2 | 4 | 32 | 128 | 2048,),  # 224
    (1 | 8 | 256, 2 | 4 | 32 | 128 | 2048),  # 225
    (1 | 4 | 32 | 128 | 512 | 2048,),  # 226
    (4 | 8 | 32 | 128 | 256 | 512 | 2048,),  # 227
    (2 | 4 | 16 | 32 | 256 | 2048,),  # 228
    (1 | 2 | 4 | 8 | 16 | 32 | 2048,),  # 229
    (1 | 4 | 16 | 32 | 256 | 512 | 2048,),  # 230
    (16 | 32 | 512, 4 | 8 | 2048),  # 231
    (2 | 4 | 16 | 128 | 512 | 2048,),  # 232
    (1 | 8 | 256, 2 | 4 | 16 | 128 | 512 | 2048),  # 233
    (1 | 4 | 16 | 128 | 2048,),  # 234
    (4 | 8 | 16 | 128 | 256 | 2048,),  # 235
    (2 | 4 | 256 | 512 | 2048,),  # 236
    (1 | 2 | 4 | 8 | 512 | 2048,),  # 237
    (1 | 4 | 256 | 2048,),  # 238
    (4 | 8 | 2048,),  # 239
    (2 | 8 | 32 | 128,),  # 240
    (1 | 2 | 32 | 128 | 256,),  # 241
    (1 | 8 | 32 | 128 | 512,),  # 242
    (32 | 128 | 256 | 512,),  # 243
    (2 | 8 | 16 | 32 | 256,),  # 244
    (1 | 2 | 16 | 32,),  # 245
    (1 | 8 | 16 | 32 | 256 | 512,),  # 246
    (16 | 32 | 512,),  # 247
    (2 | 8 | 16 | 128 | 512,),  # 248
    (1 | 2 | 16 | 128 | 256 | 512,),  # 249
    (1 | 8 | 16 | 128,),  # 250
    (16 | 128 | 256,),  # 251
    (2 | 8 | 256 | 512,),  # 252
    (1 | 2 | 512,),  # 253
    (1 | 8 | 256,),  # 254
    (),  # 255
)

_NO_DIRECTION = 255

_PROBLEMATIC: tuple[int, ...] = (
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 1, 0, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 3, 255, 255, 2, 255,
    255, 255, 255, 255, 255, 255, 255, 5, 255, 255, 255, 255, 255, 255, 5, 5,
    255, 255, 255, 255, 255, 255, 4, 255, 255, 255, 3, 3, 1, 1, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255,
    255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 255, 5, 255, 5, 255, 5,
    255, 255, 255, 255, 255, 255, 255, 3, 255, 255, 255, 255, 255, 2, 255, 255,
    255, 255, 255, 255, 255, 3, 255, 3, 255, 4, 255, 255, 0, 255, 0, 255,
    255, 255, 255, 255, 255, 255, 255, 1, 255, 255, 255, 0, 255, 255, 255, 255,
    255, 255, 255, 1, 255, 255, 255, 1, 255, 4, 2, 255, 255, 255, 2, 255,
    255, 255, 255, 0, 255, 2, 4, 255, 255, 255, 255, 0, 255, 2, 255, 255,
    255, 255, 255, 255, 255, 255, 4, 255, 255, 4, 255, 255, 255, 255, 255, 255,
)


def _check_code(cube_code: int) -> int:
    if not isinstance(cube_code, int) or isinstance(cube_code, bool):
        raise TypeError("cube code must be an int")
    if not 0 <= cube_code <= 255:
        raise ValueError(f"cube code out of range: {cube_code}")
    return cube_code


def dual_points(cube_code: int) -> tuple[int, ...]:
    """Return the dual point codes of a cell configuration, in table order.

    A cell with no surface crossing yields an empty tuple; at most four
    dual points exist for any configuration.
    """
    return _DUAL_POINTS[_check_code(cube_code)]


def problematic_direction(cube_code: int) -> int | None:
    """Return the face direction to inspect for a non-manifold configuration.

    The direction is ``2 * axis + side`` where ``axis`` is 0, 1 or 2 for
    x, y or z and ``side`` is 1 for the positive neighbour and 0 for the
    negative one. Configurations that are never ambiguous give ``None``.
    """
    direction = _PROBLEMATIC[_check_code(cube_code)]
    return None if direction == _NO_DIRECTION else direction